# tests/test_github_service.py
import pytest
import requests

from grass_fireworks.core import GlobalCfg
from grass_fireworks.services.github import (
    CONTRIBUTION_QUERY,
    GitHubApiError,
    GitHubService,
    GitHubServiceError,
    UserNotFoundError,
)

from conftest import MockResponse, MockSession, contribution_payload


def service(*outcomes, token="ghp_test"):
    session = MockSession(*outcomes)
    return GitHubService(token, timeout_seconds=2.5, session=session), session


def test_returns_last_day_of_last_week():
    svc, _ = service(MockResponse(contribution_payload([1, 2, 3, 4, 5, 6, 7], [8, 9, 12])))
    assert svc.fetch_today_contribution_count("octocat") == 12


def test_request_shape():
    svc, session = service(MockResponse(contribution_payload([0])))
    svc.fetch_today_contribution_count("octocat")
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "https://api.github.com/graphql"
    assert call["timeout"] == 2.5
    assert call["json"] == {"query": CONTRIBUTION_QUERY, "variables": {"username": "octocat"}}
    headers = call["headers"]
    assert headers["Authorization"] == "Bearer ghp_test"
    assert headers["User-Agent"] == "grass-fireworks"
    assert headers["Content-Type"] == "application/json"


def test_no_token_sends_no_authorization():
    svc, session = service(MockResponse(contribution_payload([3])), token=None)
    assert svc.fetch_today_contribution_count("octocat") == 3
    assert "Authorization" not in session.calls[0]["headers"]


def test_null_user_is_not_found():
    svc, _ = service(MockResponse({"data": {"user": None}}))
    with pytest.raises(UserNotFoundError) as exc:
        svc.fetch_today_contribution_count("ghost-user")
    assert exc.value.username == "ghost-user"


def test_not_found_error_payload_is_user_not_found():
    body = {
        "data": {"user": None},
        "errors": [{
            "type": "NOT_FOUND",
            "path": ["user"],
            "locations": [{"line": 3, "column": 3}],
            "message": "Could not resolve to a User with the login of 'nobody-x'.",
        }],
    }
    svc, _ = service(MockResponse(body))
    with pytest.raises(UserNotFoundError) as exc:
        svc.fetch_today_contribution_count("nobody-x")
    assert exc.value.username == "nobody-x"


def test_other_graphql_errors_with_null_user_stay_api_errors():
    body = {
        "data": {"user": None},
        "errors": [{"type": "RATE_LIMITED", "message": "API rate limit exceeded"}],
    }
    svc, _ = service(MockResponse(body))
    with pytest.raises(GitHubApiError, match="rate limit"):
        svc.fetch_today_contribution_count("octocat")


def test_graphql_error_uses_first_message():
    body = {"errors": [{"message": "API rate limit exceeded"}, {"message": "second"}]}
    svc, _ = service(MockResponse(body))
    with pytest.raises(GitHubApiError, match="API rate limit exceeded"):
        svc.fetch_today_contribution_count("octocat")


@pytest.mark.parametrize("status", [401, 403, 500, 502])
def test_http_error_status_message(status):
    svc, _ = service(MockResponse(status_code=status))
    with pytest.raises(GitHubApiError) as exc:
        svc.fetch_today_contribution_count("octocat")
    assert exc.value.message == f"HTTP {status}"


def test_timeout_message():
    svc, _ = service(requests.Timeout("read timed out"))
    with pytest.raises(GitHubApiError) as exc:
        svc.fetch_today_contribution_count("octocat")
    assert exc.value.message == "Request timeout"


def test_connection_error_is_api_error():
    svc, _ = service(requests.ConnectionError("connection refused"))
    with pytest.raises(GitHubApiError, match="connection refused"):
        svc.fetch_today_contribution_count("octocat")


@pytest.mark.parametrize(
    "body",
    [
        {"data": {"user": {"contributionsCollection": {}}}},
        {"data": {"user": {"contributionsCollection": {"contributionCalendar": {"weeks": []}}}}},
        {"data": {"user": {"contributionsCollection": {"contributionCalendar": {
            "weeks": [{"contributionDays": [{"date": "2024-06-01"}]}]}}}}},
    ],
)
def test_malformed_payload_is_api_error(body):
    svc, _ = service(MockResponse(body))
    with pytest.raises(GitHubApiError):
        svc.fetch_today_contribution_count("octocat")


def test_errors_share_a_base_class():
    assert issubclass(UserNotFoundError, GitHubServiceError)
    assert issubclass(GitHubApiError, GitHubServiceError)


def test_retries_server_errors_when_configured(monkeypatch):
    monkeypatch.setattr("grass_fireworks.utils.http.time.sleep", lambda s: None)
    session = MockSession(MockResponse(status_code=502), MockResponse(contribution_payload([4])))
    svc = GitHubService("t", session=session, retries=1)
    assert svc.fetch_today_contribution_count("octocat") == 4
    assert len(session.calls) == 2


def test_retries_timeouts_then_gives_up(monkeypatch):
    sleeps = []
    monkeypatch.setattr("grass_fireworks.utils.http.time.sleep", sleeps.append)
    session = MockSession(requests.Timeout("slow"), MockResponse(contribution_payload([6])))
    assert GitHubService("t", session=session, retries=1).fetch_today_contribution_count("octocat") == 6
    assert sleeps == [0.5]

    session = MockSession(MockResponse(status_code=503), MockResponse(status_code=503))
    with pytest.raises(GitHubApiError) as exc:
        GitHubService("t", session=session, retries=1).fetch_today_contribution_count("octocat")
    assert exc.value.message == "HTTP 503"
    assert len(session.calls) == 2


def test_from_config_reads_token_from_env():
    cfg = GlobalCfg(github={"token_env": "FIREWORKS_TOKEN", "timeout_seconds": 3, "retries": 2})
    svc = GitHubService.from_config(cfg, env={"FIREWORKS_TOKEN": " abc "})
    assert svc.token == "abc"
    assert svc.timeout_seconds == 3
    assert svc.retries == 2


def test_from_config_without_token():
    svc = GitHubService.from_config(GlobalCfg(), env={})
    assert svc.token is None
