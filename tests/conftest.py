"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock, patch

import pytest
import requests
from fastapi.testclient import TestClient

from backend.schemas import Job

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's .env from leaking into tests."""
    for key in ("JOBS_API_URL", "JOBS_PROXY_URL", "JOBS_API_TIMEOUT", "LOG_LEVEL",
                "API_HOST", "API_PORT"):
        monkeypatch.delenv(key, raising=False)


def job_dict(job_id, company="Acme", days_ago=0, title="Business Analyst",
             description="<p>Analyse <b>things</b></p>"):
    return {
        "jobId": job_id,
        "jobTitle": title,
        "companyName": company,
        "jobDescription": description,
        "postingDate": (NOW - timedelta(days=days_ago)).strftime("%Y-%m-%dT%H:%M:%S.000Z"),
        "OBJurl": f"https://www.zippia.com/jobs/{job_id}",
    }


def make_job(job_id, **kwargs):
    return Job.model_validate(job_dict(job_id, **kwargs))


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def sample_jobs():
    companies = ["Zeta", "acme", "Beta", "Acme", "delta", "Charlie",
                 "beta", "Echo", "Alpha", "Foxtrot", "Golf", "Hotel"]
    return [make_job(i + 1, company=c, days_ago=i) for i, c in enumerate(companies)]


def create_mock_response(status_code, json_data):
    """Helper to create a mock requests.Response."""
    mock_resp = MagicMock()
    mock_resp.status_code = status_code
    mock_resp.json.return_value = json_data
    if status_code >= 400:
        mock_resp.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Error"
        )
    else:
        mock_resp.raise_for_status.return_value = None
    return mock_resp


@pytest.fixture
def mock_post():
    with patch("backend.engine.fetchers.requests.post") as post:
        yield post


@pytest.fixture
def client():
    from backend.main import app

    with TestClient(app) as test_client:
        yield test_client
