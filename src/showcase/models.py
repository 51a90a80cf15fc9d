from datetime import date, datetime, timezone
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

ProjectSource = Literal["github", "markdown"]


def as_utc_datetime(value):
    """
    YAML의 date / naive datetime을 UTC aware datetime으로 통일 (정렬 시 비교 가능하도록)
    """
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, str) and len(value) == 10:
        value = date.fromisoformat(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    return value


class RepositoryRecord(BaseModel):
    """
    GitHub REST repository snapshot (한 번의 fetch 동안만 유효)
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    full_name: str
    description: Optional[str] = None
    html_url: str
    homepage: Optional[str] = None
    language: Optional[str] = None
    topics: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
    pushed_at: Optional[datetime] = None
    stargazers_count: int = 0
    forks_count: int = 0
    open_issues_count: int = 0
    private: bool = False
    fork: bool = False
    archived: bool = False
    default_branch: str = "main"

    @classmethod
    def from_github(cls, repo) -> "RepositoryRecord":
        """
        PyGithub Repository -> RepositoryRecord
        """
        return cls(
            id=repo.id,
            name=repo.name,
            full_name=repo.full_name,
            description=repo.description,
            html_url=repo.html_url,
            homepage=repo.homepage,
            language=repo.language,
            topics=list(repo.topics or []),
            created_at=repo.created_at,
            updated_at=repo.updated_at,
            pushed_at=repo.pushed_at,
            stargazers_count=repo.stargazers_count,
            forks_count=repo.forks_count,
            open_issues_count=repo.open_issues_count,
            private=repo.private,
            fork=repo.fork,
            archived=repo.archived,
            default_branch=repo.default_branch,
        )


class ProjectOverrideConfig(BaseModel):
    """
    Per-repository overrides authored in core.config.github_projects.
    Every field except ``repo`` wins over the value derived from GitHub.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    repo: str
    title: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[List[str]] = None
    image: Optional[str] = None
    featured: Optional[bool] = None
    live_url: Optional[str] = None


class Project(BaseModel):
    """
    Display-ready project, from GitHub (``source="github"``) or from a local
    markdown content file (``source="markdown"``).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    slug: str
    title: str
    description: str
    image: str
    tags: List[str] = Field(default_factory=list)
    live_url: Optional[str] = None
    repo_url: Optional[str] = None
    featured: bool = False
    publish_date: datetime
    source: ProjectSource = "github"
    stars: Optional[int] = None
    language: Optional[str] = None

    @field_validator("publish_date", mode="before")
    @classmethod
    def _normalize_publish_date(cls, value):
        return as_utc_datetime(value)

    @field_validator("publish_date")
    @classmethod
    def _ensure_aware(cls, value: datetime) -> datetime:
        return as_utc_datetime(value)


class LocalProject(BaseModel):
    """
    Front matter schema of a local project content file
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str
    description: str
    image: str
    tags: List[str]
    live_url: Optional[str] = None
    repo_url: Optional[str] = None
    featured: bool = False
    publish_date: datetime

    @field_validator("live_url", "repo_url")
    @classmethod
    def _must_be_http_url(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.startswith(("http://", "https://")):
            raise ValueError("must be an http(s) URL")
        return value

    @field_validator("publish_date", mode="before")
    @classmethod
    def _normalize_publish_date(cls, value):
        return as_utc_datetime(value)

    @field_validator("publish_date")
    @classmethod
    def _ensure_aware(cls, value: datetime) -> datetime:
        return as_utc_datetime(value)

    def to_project(self, slug: str) -> Project:
        return Project(
            slug=slug,
            title=self.title,
            description=self.description,
            image=self.image,
            tags=list(self.tags),
            live_url=self.live_url,
            repo_url=self.repo_url,
            featured=self.featured,
            publish_date=self.publish_date,
            source="markdown",
        )


class ProjectColors(BaseModel):
    primary: str
    secondary: str
    accent: str


class ContactFormData(BaseModel):
    name: str
    email: str
    subject: str
    message: str


class ValidationResult(BaseModel):
    valid: bool
    errors: Dict[str, str] = Field(default_factory=dict)
