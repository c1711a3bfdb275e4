"""
GitHub GraphQL client: today's contribution count for one user.

"Today" is the last day of the last week in the contribution calendar,
which GitHub resolves in the user's own timezone.
"""

from typing import Any, Dict, Optional

import requests

from grass_fireworks.core import GlobalCfg, get_logger, github_token
from grass_fireworks.utils.http import DEFAULT_TIMEOUT, make_session, post_graphql

log = get_logger("github")

GRAPHQL_ENDPOINT = "https://api.github.com/graphql"

CONTRIBUTION_QUERY = """
query($username: String!) {
  user(login: $username) {
    contributionsCollection {
      contributionCalendar {
        weeks {
          contributionDays {
            contributionCount
            date
          }
        }
      }
    }
  }
}
"""


class GitHubServiceError(Exception):
    pass


class UserNotFoundError(GitHubServiceError):
    def __init__(self, username: str):
        super().__init__(f"GitHub user not found: {username}")
        self.username = username


class GitHubApiError(GitHubServiceError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class GitHubService:
    """Fetches contribution counts. One timeout-bounded POST per call."""

    def __init__(
        self,
        token: Optional[str],
        timeout_seconds: float = DEFAULT_TIMEOUT,
        endpoint: str = GRAPHQL_ENDPOINT,
        session: Optional[requests.Session] = None,
        user_agent: str = "grass-fireworks",
        retries: int = 0,
    ):
        self.token = token
        self.timeout_seconds = timeout_seconds
        self.endpoint = endpoint
        self.session = session or make_session()
        self.user_agent = user_agent
        self.retries = retries

    @classmethod
    def from_config(cls, cfg: GlobalCfg, env: Optional[dict] = None) -> "GitHubService":
        token = github_token(cfg, env)
        if not token:
            log.warning(f"[github] {cfg.github.token_env} not set; requests will be unauthenticated")
        return cls(
            token,
            timeout_seconds=cfg.github.timeout_seconds,
            endpoint=cfg.github.endpoint,
            user_agent=cfg.github.user_agent,
            retries=cfg.github.retries,
        )

    def _query(self, username: str) -> Dict[str, Any]:
        try:
            return post_graphql(
                self.session,
                self.endpoint,
                CONTRIBUTION_QUERY,
                {"username": username},
                token=self.token,
                user_agent=self.user_agent,
                timeout=self.timeout_seconds,
                retries=self.retries,
            )
        except requests.Timeout:
            raise GitHubApiError("Request timeout") from None
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "error"
            raise GitHubApiError(f"HTTP {status}") from e
        except requests.RequestException as e:
            raise GitHubApiError(str(e) or "Unknown error") from e
        except ValueError as e:
            # body was not JSON
            raise GitHubApiError(f"Invalid JSON response: {e}") from e

    def fetch_today_contribution_count(self, username: str) -> int:
        """Return today's contribution count.

        Raises:
            UserNotFoundError: GitHub has no user with that login.
            GitHubApiError: transport failure, non-2xx status, GraphQL error
                or an unexpected payload shape.
        """
        payload = self._query(username)

        errors = payload.get("errors") or []
        # unknown logins come back as user: null plus a NOT_FOUND error
        if any(isinstance(e, dict) and e.get("type") == "NOT_FOUND" for e in errors):
            raise UserNotFoundError(username)
        if errors:
            first = errors[0]
            message = first.get("message") if isinstance(first, dict) else str(first)
            raise GitHubApiError(message or "GraphQL error")

        user = (payload.get("data") or {}).get("user")
        if not user:
            raise UserNotFoundError(username)

        try:
            weeks = user["contributionsCollection"]["contributionCalendar"]["weeks"]
            last_day = weeks[-1]["contributionDays"][-1]
            count = int(last_day["contributionCount"])
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise GitHubApiError(f"Unexpected contribution payload: {e!r}") from e

        log.info(f"[github] {username}: {count} contributions on {last_day.get('date')}")
        return count
