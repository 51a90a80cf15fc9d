# src/showcase/projects/queries.py

from typing import List, Sequence

from showcase.models import Project


def sort_by_date(projects: Sequence[Project]) -> List[Project]:
    """
    Newest first; returns a new list (input untouched, ties keep input order)
    """
    return sorted(projects, key=lambda project: project.publish_date, reverse=True)


def featured_projects(projects: Sequence[Project]) -> List[Project]:
    return [project for project in projects if project.featured]


def filter_by_tag(projects: Sequence[Project], tag: str) -> List[Project]:
    """
    Case-insensitive substring match: "react" matches "React" and "React Native"
    """
    needle = tag.lower()
    return [
        project
        for project in projects
        if any(needle in project_tag.lower() for project_tag in project.tags)
    ]


def all_tags(projects: Sequence[Project]) -> List[str]:
    return sorted({tag for project in projects for tag in project.tags})


def search_projects(projects: Sequence[Project], query: str) -> List[Project]:
    needle = query.strip().lower()
    if not needle:
        return []

    return [
        project
        for project in projects
        if needle in project.title.lower() or needle in project.description.lower()
    ]
