import asyncio
import json
from pathlib import Path

from core.config.settings import settings
from core.containers.app_containers import AppContainer
from core.logging.logger import get_logger

logger = get_logger(__name__)


async def main():
    """
    정적 사이트 빌드용: GitHub + local content를 합쳐 JSON으로 저장
    """
    container = AppContainer()
    project_service = container.project_service()

    logger.info("=" * 60)
    logger.info("Portfolio project build starting")
    logger.info("=" * 60)

    projects = await project_service.load()

    output = Path(settings.BUILD_OUTPUT_PATH)
    output.parent.mkdir(parents=True, exist_ok=True)
    payload = [project.model_dump(mode="json", by_alias=True) for project in projects]
    output.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")

    logger.info(f"Wrote {len(projects)} projects to {output}")


if __name__ == "__main__":
    asyncio.run(main())
