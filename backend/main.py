import logging
from typing import List, Optional

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse
import uvicorn

from backend.config import api_host, api_port, configure_logging, validate_env
from backend.engine.fetchers import UpstreamError
from backend.engine.search_engine import run_job_search
from backend.schemas import JobsApiResponse

configure_logging()
validate_env()

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Jobs Listing API",
    version="1.0.0"
)


def _json(body: JobsApiResponse, status_code: int) -> JSONResponse:
    # message is only sent on failure; job fields keep their nulls
    exclude = {"message"} if body.message is None else None
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True, exclude=exclude),
    )


# -------------------------
# Health
# -------------------------
@app.get("/health")
def health():
    return {"status": "ok"}


# -------------------------
# Jobs proxy
# -------------------------
@app.api_route("/api/jobs", methods=["GET", "POST"], response_model=JobsApiResponse)
def jobs_proxy(
    companySkills: Optional[str] = Query(None),
    dismissedListingHashes: Optional[List[str]] = Query(None),
    fetchJobDesc: Optional[str] = Query(None),
    jobTitle: Optional[str] = Query(None),
    locations: Optional[List[str]] = Query(None),
    numJobs: Optional[str] = Query(None),
    previousListingHashes: Optional[List[str]] = Query(None),
):
    try:
        jobs = run_job_search(
            companySkills=companySkills,
            dismissedListingHashes=dismissedListingHashes,
            fetchJobDesc=fetchJobDesc,
            jobTitle=jobTitle,
            locations=locations,
            numJobs=numJobs,
            previousListingHashes=previousListingHashes,
        )
    except UpstreamError:
        logger.exception("Jobs proxy request failed")
        return _json(
            JobsApiResponse(success=False, message="Internal Server Error", jobs=[]),
            500,
        )

    return _json(JobsApiResponse(success=True, jobs=jobs), 200)


def run():
    uvicorn.run(app, host=api_host(), port=api_port())


if __name__ == "__main__":
    run()
