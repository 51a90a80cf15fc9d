# src/showcase/projects/aggregator.py

import asyncio
from typing import Iterable, List, Optional, Sequence, Tuple

from core.logging.logger import get_logger
from showcase.mappers.github_project_mapper import (
    FALLBACK_DESCRIPTION,
    FALLBACK_TAG,
    to_project_data,
)
from showcase.models import LocalProject, Project, ProjectOverrideConfig, RepositoryRecord
from showcase.projects.queries import sort_by_date
from showcase.sources.github.client import GitHubClient
from showcase.sources.github.readme import (
    MAX_TECH_STACK,
    extract_description,
    extract_live_url,
    extract_tech_stack,
)

# 태그가 이 개수 이하일 때만 README tech stack으로 보강
TAG_ENRICH_THRESHOLD = 1


def merge_tags(tags: Sequence[str], extra: Iterable[str], limit: int = MAX_TECH_STACK) -> List[str]:
    """
    Ordered, case-insensitive union of ``tags`` and ``extra`` capped at ``limit``
    """
    merged: List[str] = []
    seen = set()
    for tag in list(tags) + list(extra):
        key = tag.lower()
        if key in seen:
            continue
        seen.add(key)
        merged.append(tag)
    return merged[:limit]


class ProjectAggregator:
    """
    설정된 repository 목록을 GitHub에서 병렬로 가져와 Project로 변환
    """

    def __init__(
        self,
        client: GitHubClient,
        username: str,
        tag_limit: int = MAX_TECH_STACK,
        enrich_threshold: int = TAG_ENRICH_THRESHOLD,
    ):
        self.client = client
        self.username = username
        self.tag_limit = tag_limit
        self.enrich_threshold = enrich_threshold
        self.logger = get_logger(__name__)

    async def fetch_configured_projects(self, configs: Sequence[ProjectOverrideConfig]) -> List[Project]:
        """
        Entries run concurrently; a failing entry is logged and dropped
        without affecting the others. Output keeps configuration order.
        """
        self.logger.info(f"Fetching {len(configs)} configured repositories for {self.username}")

        results = await asyncio.gather(*(self._fetch_entry(config) for config in configs))
        projects = [project for project in results if project is not None]

        self.logger.info(f"Built {len(projects)}/{len(configs)} GitHub projects")
        return projects

    async def _fetch_entry(self, config: ProjectOverrideConfig) -> Optional[Project]:
        try:
            # PyGithub은 blocking -> thread로 넘겨서 repo / README 동시 요청
            repo, readme = await asyncio.gather(
                asyncio.to_thread(self.client.get_repository, self.username, config.repo),
                asyncio.to_thread(self.client.get_readme, self.username, config.repo),
            )

            if repo is None:
                self.logger.warning(f"Skipping {config.repo}: repository not available")
                return None

            return self.build_project(repo, config, readme)

        except Exception as e:
            self.logger.error(f"Failed to build project for {config.repo}: {e}", exc_info=True)
            return None

    def build_project(
        self,
        repo: RepositoryRecord,
        config: ProjectOverrideConfig,
        readme: Optional[str],
    ) -> Project:
        project = to_project_data(repo, config)

        description = (
            config.description
            or extract_description(readme)
            or repo.description
            or FALLBACK_DESCRIPTION
        )
        live_url = config.live_url or repo.homepage or extract_live_url(readme)

        tags = project.tags
        if not config.tags and len(tags) <= self.enrich_threshold:
            tech_stack = extract_tech_stack(readme, self.tag_limit)
            if tech_stack:
                # "Code"는 자리 채우기용 태그라 실제 스택이 있으면 버림
                base = [] if tags == [FALLBACK_TAG] else tags
                tags = merge_tags(base, tech_stack, self.tag_limit)

        return project.model_copy(
            update={
                "description": description,
                "live_url": live_url,
                "tags": tags,
            }
        )


def merge_projects(
    local_projects: Iterable[Tuple[str, LocalProject]],
    github_projects: Iterable[Project],
) -> List[Project]:
    """
    Local content entries (source="markdown") + GitHub projects, newest first
    """
    merged = [data.to_project(slug) for slug, data in local_projects]
    merged.extend(github_projects)
    return sort_by_date(merged)
