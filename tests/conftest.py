"""
Test configuration and fixtures.

This module provides pytest fixtures and monkeypatching to ensure:
- no test reaches the real GitHub API
- wall-clock time is pinned where the output depends on it
- every API test gets a fresh app (and so a fresh response cache)
"""

import os
import sys
from datetime import date

import pytest
import requests

# Ensure repo root is on sys.path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from grass_fireworks.services.github import GitHubApiError, UserNotFoundError
from grass_fireworks.utils.dates import FixedClock

# 2024-06-02 is day 154 of a leap year: even (kata) and not a lucky day
DEFAULT_TEST_DAY = date(2024, 6, 2)


def mock_network_request(*args, **kwargs):
    """Should never be called; tests inject sessions or fake services"""
    raise RuntimeError(
        "Network request attempted in a test! "
        "This indicates the test is not properly isolated. "
        f"URL: {kwargs.get('url') or (args[-1] if args else 'unknown')}"
    )


@pytest.fixture(autouse=True)
def block_network(monkeypatch):
    """Auto-applied: block all outbound HTTP through requests"""
    monkeypatch.setattr(requests, "get", mock_network_request)
    monkeypatch.setattr(requests, "post", mock_network_request)
    monkeypatch.setattr(requests.Session, "request", mock_network_request)


class MockResponse:
    """Mock HTTP response for testing"""

    def __init__(self, json_data=None, status_code=200, content=b"{}"):
        self.json_data = json_data or {}
        self.status_code = status_code
        self.content = content
        self.headers = {"content-type": "application/json"}

    def json(self):
        return self.json_data

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}", response=self)


class MockSession:
    """Stands in for requests.Session; replays queued responses or raises queued errors"""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def contribution_payload(*weeks):
    """GraphQL body with one week per argument, each a list of daily counts"""
    return {
        "data": {
            "user": {
                "contributionsCollection": {
                    "contributionCalendar": {
                        "weeks": [
                            {
                                "contributionDays": [
                                    {"contributionCount": c, "date": f"2024-06-{w * 7 + d + 1:02d}"}
                                    for d, c in enumerate(days)
                                ]
                            }
                            for w, days in enumerate(weeks)
                        ]
                    }
                }
            }
        }
    }


class FakeGitHubService:
    """In-memory GitHubService: commits per login, or an exception to raise"""

    def __init__(self, counts=None, error=None):
        self.counts = counts or {}
        self.error = error
        self.calls = []

    def fetch_today_contribution_count(self, username):
        self.calls.append(username)
        if self.error is not None:
            raise self.error
        if username not in self.counts:
            raise UserNotFoundError(username)
        return self.counts[username]


@pytest.fixture
def fixed_clock():
    return FixedClock(DEFAULT_TEST_DAY)


@pytest.fixture
def fake_github():
    return FakeGitHubService({"octocat": 10, "quiet": 0, "busy": 64})


@pytest.fixture
def failing_github():
    return FakeGitHubService(error=GitHubApiError("HTTP 502"))


@pytest.fixture
def make_client(fixed_clock):
    """Factory: TestClient over a fresh app with clock and GitHub overridden"""
    from fastapi.testclient import TestClient

    from fireworks_api import create_app
    from fireworks_api.routes import get_clock, get_github_service

    def _make(github=None, clock=None):
        app = create_app()
        app.dependency_overrides[get_clock] = lambda: clock or fixed_clock
        app.dependency_overrides[get_github_service] = lambda: github or FakeGitHubService()
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client, fake_github):
    return make_client(github=fake_github)
