from dependency_injector import containers, providers

from core.config.github_projects import GITHUB_PROJECTS, GITHUB_USERNAME
from core.config.settings import settings
from showcase.projects.aggregator import ProjectAggregator
from showcase.projects.service import ProjectService
from showcase.sources.github.client import GitHubClient


class AppContainer(containers.DeclarativeContainer):

    github_client = providers.Singleton(
        GitHubClient,
        token=settings.GITHUB_TOKEN,
    )

    project_aggregator = providers.Singleton(
        ProjectAggregator,
        client=github_client,
        username=GITHUB_USERNAME,
        tag_limit=settings.PROJECT_TAG_LIMIT,
        enrich_threshold=settings.PROJECT_TAG_ENRICH_THRESHOLD,
    )

    project_service = providers.Singleton(
        ProjectService,
        aggregator=project_aggregator,
        configs=GITHUB_PROJECTS,
        content_dir=settings.CONTENT_DIR,
    )
