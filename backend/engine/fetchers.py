import logging

import requests
from pydantic import ValidationError

from backend import config
from backend.schemas import JobsApiPayload, UpstreamJobsResponse

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """The jobs provider could not be reached or sent something unusable."""


# =========================================================
# UPSTREAM (ZIPPIA) SEARCH
# =========================================================
def fetch_jobs(payload: JobsApiPayload, url=None):
    url = url or config.jobs_api_url()
    body = payload.model_dump()
    logger.debug("POST %s payload=%s", url, body)

    try:
        r = requests.post(url, json=body, timeout=config.jobs_api_timeout())
        r.raise_for_status()
        data = UpstreamJobsResponse.model_validate(r.json())
    except requests.exceptions.RequestException as e:
        raise UpstreamError(f"jobs request to {url} failed: {e}") from e
    except ValidationError as e:
        raise UpstreamError(f"unexpected jobs response shape from {url}") from e
    except ValueError as e:
        raise UpstreamError(f"jobs response from {url} is not JSON") from e

    logger.info("Fetched %d jobs from %s", len(data.jobs), url)
    return data.jobs


# =========================================================
# PAGE DATA LOAD (proxy if configured, upstream otherwise)
# =========================================================
def load_listing_jobs(payload: JobsApiPayload):
    try:
        return fetch_jobs(payload, url=config.jobs_proxy_url())
    except UpstreamError:
        logger.exception("Could not load jobs for the listing page")
        return []
