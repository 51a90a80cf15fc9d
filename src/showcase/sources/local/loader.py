# src/showcase/sources/local/loader.py

from pathlib import Path
from typing import List, Tuple, Union

import yaml
from pydantic import ValidationError

from core.logging.logger import get_logger
from showcase.models import LocalProject

logger = get_logger(__name__)

FRONT_MATTER_FENCE = "---"


def parse_front_matter(text: str) -> Tuple[dict, str]:
    """
    ``---`` 로 감싼 YAML front matter와 본문 분리

    Returns:
        (front matter dict, markdown body). front matter가 없으면 ({}, text)
    """
    lines = text.splitlines()
    if not lines or lines[0].strip() != FRONT_MATTER_FENCE:
        return {}, text

    for idx in range(1, len(lines)):
        if lines[idx].strip() == FRONT_MATTER_FENCE:
            meta = yaml.safe_load("\n".join(lines[1:idx])) or {}
            if not isinstance(meta, dict):
                raise ValueError("front matter must be a mapping")
            return meta, "\n".join(lines[idx + 1:]).lstrip("\n")

    raise ValueError("unterminated front matter")


def load_local_projects(content_dir: Union[str, Path]) -> List[Tuple[str, LocalProject]]:
    """
    content_dir/*.md -> [(slug, LocalProject)], slug = file stem.
    Invalid files are logged and skipped.
    """
    root = Path(content_dir)
    if not root.is_dir():
        logger.info(f"No local content directory at {root}")
        return []

    projects = []
    for path in sorted(root.glob("*.md")):
        try:
            meta, _ = parse_front_matter(path.read_text(encoding="utf-8"))
            projects.append((path.stem, LocalProject.model_validate(meta)))
        except (OSError, ValueError, ValidationError, yaml.YAMLError) as e:
            logger.error(f"Invalid project content {path.name}: {e}")

    logger.info(f"Loaded {len(projects)} local projects from {root}")
    return projects
