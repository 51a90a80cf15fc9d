# src/showcase/sources/github/client.py

from typing import List, Optional

import requests
from github import Auth, Github, GithubException, UnknownObjectException
from github.ContentFile import ContentFile

from core.logging.logger import get_logger
from showcase.models import RepositoryRecord
from showcase.sources.github.filters import is_listable_repo

OPEN_GRAPH_BASE = "https://opengraph.githubassets.com/1"
USER_AGENT = "Portfolio-Site"


def open_graph_image_url(username: str, repo_name: str) -> str:
    return f"{OPEN_GRAPH_BASE}/{username}/{repo_name}"


class GitHubClient:
    """
    Low-level GitHub API wrapper.
    Only responsible for HTTP communication; every call degrades to
    None / [] instead of raising.
    """

    def __init__(self, token: Optional[str] = None):
        # 토큰은 rate limit만 올려줌 (없어도 동작 동일)
        auth = Auth.Token(token) if token else None
        # 재시도 없음: 실패한 요청은 그대로 None / [] 처리
        self.client = Github(auth=auth, per_page=100, user_agent=USER_AGENT, retry=None)
        self.logger = get_logger(__name__)

    def list_repositories(self, username: str) -> List[RepositoryRecord]:
        """
        최근 업데이트 순 최대 100개, private / fork / archived 제외
        """
        try:
            page = self.client.get_user(username).get_repos(sort="updated").get_page(0)
            return [
                RepositoryRecord.from_github(repo)
                for repo in page
                if is_listable_repo(repo)
            ]
        except Exception as e:
            self.logger.error(f"Failed to fetch GitHub repositories for {username}: {e}")
            return []

    def get_repository(self, username: str, repo_name: str) -> Optional[RepositoryRecord]:
        """
        Core API: 단일 repository 조회

        Returns:
            RepositoryRecord or None (404 / API error / network error)
        """
        full_name = f"{username}/{repo_name}"
        try:
            repo = self.client.get_repo(full_name)
            return RepositoryRecord.from_github(repo)
        except UnknownObjectException:
            self.logger.warning(f"Repository not found: {full_name}")
            return None
        except GithubException as e:
            self.logger.error(f"GitHub API error ({e.status}) for {full_name}: {e}")
            return None
        except Exception as e:
            self.logger.error(f"Failed to fetch repository {full_name}: {e}")
            return None

    def get_readme(self, username: str, repo_name: str) -> Optional[str]:
        """
        Core API: README 콘텐츠 가져오기

        Returns:
            README markdown (text) or None if not found
        """
        full_name = f"{username}/{repo_name}"
        try:
            # lazy: repo 메타데이터 요청 없이 /readme 만 호출
            repo = self.client.get_repo(full_name, lazy=True)
            readme: ContentFile = repo.get_readme()
            return readme.decoded_content.decode("utf-8", errors="replace")
        except UnknownObjectException:
            self.logger.info(f"No README for {full_name}")
            return None
        except Exception as e:
            self.logger.error(f"Failed to get README for {full_name}: {e}")
            return None

    def get_open_graph_image(self, username: str, repo_name: str) -> Optional[str]:
        """
        HEAD probe against GitHub's OpenGraph image service
        """
        url = open_graph_image_url(username, repo_name)
        try:
            response = requests.head(url, headers={"User-Agent": USER_AGENT}, allow_redirects=True)
        except requests.RequestException as e:
            self.logger.warning(f"OpenGraph probe failed for {username}/{repo_name}: {e}")
            return None
        return url if response.ok else None
