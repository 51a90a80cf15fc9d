# src/core/config/github_projects.py
#
# 포트폴리오에 노출할 GitHub 저장소 목록 (빌드 시점에 고정, 런타임 설정 아님)
#
# repo 외의 필드는 모두 선택:
#   title / description / tags / image / featured / live_url
# 지정하지 않으면 GitHub 데이터와 README에서 추출한 값을 사용

from typing import List

from showcase.models import ProjectOverrideConfig

GITHUB_USERNAME = "Jettan17"

GITHUB_PROJECTS: List[ProjectOverrideConfig] = [
    ProjectOverrideConfig(
        repo="learnex-course-tutor",
        title="Learnex",
        featured=True,
        tags=["TypeScript", "Next.js", "React", "Tailwind"],
    ),
    ProjectOverrideConfig(
        repo="stratos-investment-assistant",
        title="Stratos",
        featured=False,
        tags=["TypeScript", "React", "FastAPI", "Python", "Supabase"],
    ),
    ProjectOverrideConfig(
        repo="prizm-photo-album",
        title="Prizm",
        featured=True,
        tags=["TypeScript", "Next.js", "React", "Tailwind CSS"],
        live_url="https://prizm-photo-album.vercel.app",
    ),
    ProjectOverrideConfig(
        repo="jetflux-cc-sdk",
        title="JetFlux",
        description=(
            "A comprehensive Claude Code SDK with specialized agents, slash commands, "
            "and MCP integrations for structured AI-assisted development workflows."
        ),
        featured=True,
        tags=["Claude Code", "TypeScript", "AI Agents", "Developer Tools", "CLI"],
    ),
]
