from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import requests
from github import GithubException, UnknownObjectException

from showcase.sources.github.client import GitHubClient, open_graph_image_url


def make_github_repo(**overrides):
    base = {
        "id": 1,
        "name": "prizm-photo-album",
        "full_name": "Jettan17/prizm-photo-album",
        "description": "Photo album",
        "html_url": "https://github.com/Jettan17/prizm-photo-album",
        "homepage": None,
        "language": "TypeScript",
        "topics": ["photos", "nextjs"],
        "created_at": datetime(2023, 6, 1, tzinfo=timezone.utc),
        "updated_at": datetime(2024, 1, 10, tzinfo=timezone.utc),
        "pushed_at": datetime(2024, 1, 12, tzinfo=timezone.utc),
        "stargazers_count": 7,
        "forks_count": 1,
        "open_issues_count": 0,
        "private": False,
        "fork": False,
        "archived": False,
        "default_branch": "main",
    }
    base.update(overrides)
    repo = MagicMock()
    for key, value in base.items():
        setattr(repo, key, value)
    return repo


def make_client():
    client = GitHubClient()
    client.client = MagicMock()
    client.logger = MagicMock()
    return client


class TestAuth:
    def test_token_is_passed_as_auth(self):
        with patch("showcase.sources.github.client.Github") as mock_github, \
                patch("showcase.sources.github.client.Auth") as mock_auth:
            GitHubClient(token="secret")

        mock_auth.Token.assert_called_once_with("secret")
        assert mock_github.call_args.kwargs["auth"] is mock_auth.Token.return_value
        assert mock_github.call_args.kwargs["per_page"] == 100

    def test_requests_are_not_retried(self):
        with patch("showcase.sources.github.client.Github") as mock_github:
            GitHubClient(token="secret")

        assert mock_github.call_args.kwargs["retry"] is None

    def test_failed_request_is_attempted_once(self):
        client = make_client()
        client.client.get_repo.side_effect = GithubException(500, {"message": "Server Error"}, None)

        assert client.get_repository("Jettan17", "prizm-photo-album") is None
        client.client.get_repo.assert_called_once()

    def test_anonymous_without_token(self):
        with patch("showcase.sources.github.client.Github") as mock_github:
            GitHubClient(token=None)

        assert mock_github.call_args.kwargs["auth"] is None


class TestListRepositories:
    def test_filters_private_fork_and_archived(self):
        client = make_client()
        page = [
            make_github_repo(name="keep"),
            make_github_repo(name="secret", private=True),
            make_github_repo(name="forked", fork=True),
            make_github_repo(name="old", archived=True),
        ]
        client.client.get_user.return_value.get_repos.return_value.get_page.return_value = page

        records = client.list_repositories("Jettan17")

        assert [record.name for record in records] == ["keep"]
        client.client.get_user.assert_called_once_with("Jettan17")
        client.client.get_user.return_value.get_repos.assert_called_once_with(sort="updated")

    def test_api_error_returns_empty(self):
        client = make_client()
        client.client.get_user.side_effect = GithubException(500, {"message": "boom"}, None)

        assert client.list_repositories("Jettan17") == []
        client.logger.error.assert_called_once()

    def test_network_error_returns_empty(self):
        client = make_client()
        client.client.get_user.side_effect = requests.ConnectionError("offline")

        assert client.list_repositories("Jettan17") == []


class TestGetRepository:
    def test_returns_record(self):
        client = make_client()
        client.client.get_repo.return_value = make_github_repo()

        record = client.get_repository("Jettan17", "prizm-photo-album")

        assert record.full_name == "Jettan17/prizm-photo-album"
        assert record.topics == ["photos", "nextjs"]
        client.client.get_repo.assert_called_once_with("Jettan17/prizm-photo-album")

    def test_not_found_is_a_warning(self):
        client = make_client()
        client.client.get_repo.side_effect = UnknownObjectException(404, {"message": "Not Found"}, None)

        assert client.get_repository("Jettan17", "missing") is None
        client.logger.warning.assert_called_once()
        client.logger.error.assert_not_called()

    def test_other_status_is_an_error(self):
        client = make_client()
        client.client.get_repo.side_effect = GithubException(502, {"message": "Bad Gateway"}, None)

        assert client.get_repository("Jettan17", "prizm-photo-album") is None
        client.logger.error.assert_called_once()

    def test_network_error_returns_none(self):
        client = make_client()
        client.client.get_repo.side_effect = requests.Timeout("slow")

        assert client.get_repository("Jettan17", "prizm-photo-album") is None


class TestGetReadme:
    def test_returns_decoded_text(self):
        client = make_client()
        readme = MagicMock(decoded_content="# Prizm\n\nPhotos ✨".encode("utf-8"))
        client.client.get_repo.return_value.get_readme.return_value = readme

        assert client.get_readme("Jettan17", "prizm-photo-album") == "# Prizm\n\nPhotos ✨"
        client.client.get_repo.assert_called_once_with("Jettan17/prizm-photo-album", lazy=True)

    def test_invalid_utf8_is_replaced(self):
        client = make_client()
        readme = MagicMock(decoded_content=b"# Prizm\n\nPhotos \xff album")
        client.client.get_repo.return_value.get_readme.return_value = readme

        assert client.get_readme("Jettan17", "prizm-photo-album") == "# Prizm\n\nPhotos \ufffd album"
        client.logger.error.assert_not_called()

    def test_missing_readme_returns_none(self):
        client = make_client()
        client.client.get_repo.return_value.get_readme.side_effect = UnknownObjectException(
            404, {"message": "Not Found"}, None
        )

        assert client.get_readme("Jettan17", "prizm-photo-album") is None
        client.logger.error.assert_not_called()

    def test_other_failure_returns_none(self):
        client = make_client()
        client.client.get_repo.return_value.get_readme.side_effect = GithubException(500, {}, None)

        assert client.get_readme("Jettan17", "prizm-photo-album") is None
        client.logger.error.assert_called_once()


class TestOpenGraphImage:
    def test_url_format(self):
        assert open_graph_image_url("Jettan17", "prizm") == "https://opengraph.githubassets.com/1/Jettan17/prizm"

    def test_returns_url_when_probe_succeeds(self):
        client = make_client()
        with patch("showcase.sources.github.client.requests.head") as mock_head:
            mock_head.return_value = MagicMock(ok=True)
            url = client.get_open_graph_image("Jettan17", "prizm")

        assert url == "https://opengraph.githubassets.com/1/Jettan17/prizm"
        assert mock_head.call_args.args[0] == url

    def test_returns_none_when_probe_fails(self):
        client = make_client()
        with patch("showcase.sources.github.client.requests.head") as mock_head:
            mock_head.return_value = MagicMock(ok=False)
            assert client.get_open_graph_image("Jettan17", "prizm") is None

    def test_returns_none_on_network_error(self):
        client = make_client()
        with patch("showcase.sources.github.client.requests.head") as mock_head:
            mock_head.side_effect = requests.ConnectionError("offline")
            assert client.get_open_graph_image("Jettan17", "prizm") is None
