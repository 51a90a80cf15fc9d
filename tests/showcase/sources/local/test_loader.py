from datetime import datetime, timezone

import pytest

from showcase.sources.local.loader import load_local_projects, parse_front_matter

VALID = """---
title: Weather Station
description: Raspberry Pi weather logger
image: /images/weather.png
tags:
  - Python
  - SQLite
repoUrl: https://github.com/Jettan17/weather-station
publishDate: 2023-08-14
---

# Weather Station
"""


class TestParseFrontMatter:
    def test_splits_meta_and_body(self):
        meta, body = parse_front_matter(VALID)

        assert meta["title"] == "Weather Station"
        assert meta["tags"] == ["Python", "SQLite"]
        assert body == "# Weather Station"

    def test_without_front_matter(self):
        assert parse_front_matter("# Just markdown") == ({}, "# Just markdown")

    def test_empty_front_matter(self):
        assert parse_front_matter("---\n---\nbody") == ({}, "body")

    def test_unterminated(self):
        with pytest.raises(ValueError):
            parse_front_matter("---\ntitle: x\n")

    def test_non_mapping(self):
        with pytest.raises(ValueError):
            parse_front_matter("---\n- a\n- b\n---\n")


class TestLoadLocalProjects:
    def test_loads_valid_files_sorted_by_name(self, tmp_path):
        (tmp_path / "weather-station.md").write_text(VALID, encoding="utf-8")
        (tmp_path / "alpha.md").write_text(VALID.replace("Weather Station", "Alpha"), encoding="utf-8")
        (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")

        projects = load_local_projects(tmp_path)

        assert [slug for slug, _ in projects] == ["alpha", "weather-station"]
        slug, project = projects[1]
        assert project.title == "Weather Station"
        assert project.repo_url == "https://github.com/Jettan17/weather-station"
        assert project.featured is False
        assert project.publish_date == datetime(2023, 8, 14, tzinfo=timezone.utc)

    def test_invalid_files_are_skipped(self, tmp_path):
        (tmp_path / "good.md").write_text(VALID, encoding="utf-8")
        (tmp_path / "missing-title.md").write_text(VALID.replace("title: Weather Station\n", ""), encoding="utf-8")
        (tmp_path / "bad-url.md").write_text(
            VALID.replace("https://github.com/Jettan17/weather-station", "github.com/x"), encoding="utf-8"
        )
        (tmp_path / "broken-yaml.md").write_text("---\ntitle: [unclosed\n---\n", encoding="utf-8")

        projects = load_local_projects(tmp_path)

        assert [slug for slug, _ in projects] == ["good"]

    def test_missing_directory(self, tmp_path):
        assert load_local_projects(tmp_path / "does-not-exist") == []

    def test_to_project_marks_markdown_source(self, tmp_path):
        (tmp_path / "weather-station.md").write_text(VALID, encoding="utf-8")

        slug, local = load_local_projects(tmp_path)[0]
        project = local.to_project(slug)

        assert project.slug == "weather-station"
        assert project.source == "markdown"
        assert project.stars is None
