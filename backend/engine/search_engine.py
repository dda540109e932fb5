from backend.engine.fetchers import fetch_jobs
from backend.schemas import JobsApiPayload

# Built once; the listing page always searches with this.
DEFAULT_PAYLOAD = JobsApiPayload()

_TRUE_STRINGS = {"true", "1", "yes", "on"}


def _as_bool(value):
    # query strings arrive as text; anything not clearly true reads as False
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def _as_int(value):
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def build_payload(
    companySkills=None,
    dismissedListingHashes=None,
    fetchJobDesc=None,
    jobTitle=None,
    locations=None,
    numJobs=None,
    previousListingHashes=None,
):
    """
    Merge caller overrides with the defaults.

    Any falsy override (False, 0, "", []) counts as absent, so
    numJobs=0 still searches for 20 jobs and companySkills=False stays True.
    Values that do not parse (numJobs="abc") fall back the same way.
    """
    d = DEFAULT_PAYLOAD
    return JobsApiPayload(
        companySkills=_as_bool(companySkills) or d.companySkills,
        dismissedListingHashes=dismissedListingHashes or list(d.dismissedListingHashes),
        fetchJobDesc=_as_bool(fetchJobDesc) or d.fetchJobDesc,
        jobTitle=jobTitle or d.jobTitle,
        locations=locations or list(d.locations),
        numJobs=_as_int(numJobs) or d.numJobs,
        previousListingHashes=previousListingHashes or list(d.previousListingHashes),
    )


def run_job_search(**overrides):
    """
    Unified entry point for the proxy route.
    Raises UpstreamError when the provider fails.
    """
    return fetch_jobs(build_payload(**overrides))
