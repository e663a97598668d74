"""GitHub service integration"""

import logging

from github import Auth, Github, GithubIntegration

from conventions_bot.config import Config
from conventions_bot.core.exceptions import ServiceConnectionError

logger = logging.getLogger(__name__)

class GitHubClient:
    """Issue operations performed as a GitHub App installation"""

    def __init__(self, github: Github):
        self._client = github

    @classmethod
    def from_config(cls, config: Config) -> "GitHubClient":
        """Exchange the app key for an installation-scoped client.

        PyGithub requests the installation token lazily and refreshes it
        when it expires, so the returned client is safe to share between
        requests.
        """
        integration = GithubIntegration(
            auth=Auth.AppAuth(config.github_app_id, config.github_private_key)
        )
        github = integration.get_github_for_installation(config.github_installation_id)
        logger.info(
            "GitHub client configured",
            extra={
                'app_id': config.github_app_id,
                'installation_id': config.github_installation_id,
            }
        )
        return cls(github)

    def _get_issue(self, owner: str, repo: str, number: int):
        repository = self._client.get_repo(f"{owner}/{repo}", lazy=True)
        return repository.get_issue(number)

    def create_comment(self, owner: str, repo: str, number: int, body: str) -> None:
        """Post a comment on an issue"""
        try:
            self._get_issue(owner, repo, number).create_comment(body)
        except Exception as e:
            raise ServiceConnectionError(
                f"Failed to create a comment on {owner}/{repo}#{number}: {str(e)}"
            ) from e

    def close_issue(self, owner: str, repo: str, number: int) -> None:
        """Set an issue's state to closed"""
        try:
            self._get_issue(owner, repo, number).edit(state="closed")
        except Exception as e:
            raise ServiceConnectionError(
                f"Failed to close {owner}/{repo}#{number}: {str(e)}"
            ) from e
