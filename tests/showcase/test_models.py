from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from showcase.models import LocalProject, ProjectOverrideConfig, as_utc_datetime


class TestAsUtcDatetime:
    def test_date(self):
        assert as_utc_datetime(date(2024, 1, 15)) == datetime(2024, 1, 15, tzinfo=timezone.utc)

    def test_date_string(self):
        assert as_utc_datetime("2024-01-15") == datetime(2024, 1, 15, tzinfo=timezone.utc)

    def test_naive_datetime_is_utc(self):
        assert as_utc_datetime(datetime(2024, 1, 15, 8, 30)).tzinfo == timezone.utc

    def test_other_values_pass_through(self):
        assert as_utc_datetime("2024-01-15T08:30:00Z") == "2024-01-15T08:30:00Z"


class TestLocalProject:
    def test_camel_case_fields(self):
        project = LocalProject.model_validate(
            {
                "title": "Site",
                "description": "Portfolio",
                "image": "/images/site.png",
                "tags": ["Astro"],
                "liveUrl": "https://example.com",
                "publishDate": "2024-03-01T10:00:00Z",
            }
        )

        assert project.live_url == "https://example.com"
        assert project.publish_date == datetime(2024, 3, 1, 10, tzinfo=timezone.utc)

    def test_rejects_non_http_url(self):
        with pytest.raises(ValidationError):
            LocalProject(
                title="Site",
                description="Portfolio",
                image="/images/site.png",
                tags=[],
                repo_url="ftp://example.com",
                publish_date=date(2024, 3, 1),
            )


class TestProjectOverrideConfig:
    def test_only_repo_is_required(self):
        config = ProjectOverrideConfig(repo="prizm-photo-album")

        assert config.title is None
        assert config.tags is None

    def test_accepts_camel_case(self):
        assert ProjectOverrideConfig(repo="x", liveUrl="https://x.dev").live_url == "https://x.dev"
