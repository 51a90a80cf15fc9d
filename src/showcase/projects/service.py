# src/showcase/projects/service.py

import asyncio
from typing import List, Optional, Sequence

from core.logging.logger import get_logger
from showcase.models import Project, ProjectOverrideConfig
from showcase.projects.aggregator import ProjectAggregator, merge_projects
from showcase.projects.queries import (
    all_tags,
    featured_projects,
    filter_by_tag,
    search_projects,
)
from showcase.sources.local.loader import load_local_projects


class ProjectService:
    """
    GitHub + local content를 한 번 합쳐서 들고 있는 read-only 목록
    """

    def __init__(
        self,
        aggregator: ProjectAggregator,
        configs: Sequence[ProjectOverrideConfig],
        content_dir: str,
    ):
        self.aggregator = aggregator
        self.configs = list(configs)
        self.content_dir = content_dir
        self.projects: List[Project] = []
        self.logger = get_logger(__name__)

    async def load(self) -> List[Project]:
        github_projects = await self.aggregator.fetch_configured_projects(self.configs)
        local_projects = await asyncio.to_thread(load_local_projects, self.content_dir)

        self.projects = merge_projects(local_projects, github_projects)
        self.logger.info(
            f"Project list ready: {len(self.projects)} total "
            f"({len(github_projects)} github, {len(local_projects)} markdown)"
        )
        return self.projects

    def list_projects(
        self,
        featured: Optional[bool] = None,
        tag: Optional[str] = None,
        query: Optional[str] = None,
    ) -> List[Project]:
        projects = self.projects
        if featured:
            projects = featured_projects(projects)
        if tag:
            projects = filter_by_tag(projects, tag)
        if query is not None:
            projects = search_projects(projects, query)
        return projects

    def tags(self) -> List[str]:
        return all_tags(self.projects)
