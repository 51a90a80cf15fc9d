import re
from typing import List, Optional

from showcase.imagery.placeholder import placeholder_image
from showcase.models import Project, ProjectOverrideConfig, RepositoryRecord

FALLBACK_DESCRIPTION = "A project hosted on GitHub"
FALLBACK_TAG = "Code"
MAX_TOPIC_TAGS = 5

# 순서대로 한 번씩 제거 ("my-api-app" -> "my-api" -> "my")
TITLE_SUFFIX_PATTERNS = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (r"-app$", r"-web$", r"-api$", r"-cli$", r"-bot$")
)


def to_title_case(name: str) -> str:
    """
    kebab-case / snake_case -> Title Case, keeping short all-caps acronyms
    """
    words = []
    for word in re.split(r"[-_]", name):
        if word.upper() == word and len(word) <= 4:
            words.append(word.upper())
        else:
            words.append(word[:1].upper() + word[1:].lower())
    return " ".join(words)


def extract_title(repo_name: str, override: Optional[ProjectOverrideConfig] = None) -> str:
    if override and override.title:
        return override.title

    clean_name = repo_name
    for pattern in TITLE_SUFFIX_PATTERNS:
        clean_name = pattern.sub("", clean_name)
    return to_title_case(clean_name)


def _topic_to_tag(topic: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in topic.split("-"))


def build_tags(repo: RepositoryRecord, override: Optional[ProjectOverrideConfig] = None) -> List[str]:
    if override and override.tags:
        return list(override.tags)

    tags: List[str] = []
    if repo.language:
        tags.append(repo.language)
    tags.extend(_topic_to_tag(topic) for topic in repo.topics[:MAX_TOPIC_TAGS])

    if not tags:
        tags.append(FALLBACK_TAG)
    return tags


def project_image(repo: RepositoryRecord, override: Optional[ProjectOverrideConfig] = None) -> str:
    """
    override image > generated placeholder
    """
    if override and override.image:
        return override.image
    title = extract_title(repo.name, override)
    return placeholder_image(title, repo.language, repo.name)


def to_project_data(repo: RepositoryRecord, override: Optional[ProjectOverrideConfig] = None) -> Project:
    description = (
        (override.description if override else None)
        or repo.description
        or FALLBACK_DESCRIPTION
    )
    live_url = (override.live_url if override else None) or repo.homepage or None

    return Project(
        slug=f"github-{repo.name}",
        title=extract_title(repo.name, override),
        description=description,
        image=project_image(repo, override),
        tags=build_tags(repo, override),
        live_url=live_url,
        repo_url=repo.html_url,
        featured=bool(override and override.featured),
        publish_date=repo.pushed_at or repo.updated_at,
        source="github",
        stars=repo.stargazers_count,
        language=repo.language,
    )
