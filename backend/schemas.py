from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


# =========================
# SINGLE JOB (as the upstream sends it)
# =========================
class Job(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    jobId: int
    jobTitle: str
    companyName: str
    jobDescription: str = ""
    postingDate: Optional[str] = None
    obj_url: str = Field(alias="OBJurl")


# =========================
# UPSTREAM SEARCH PAYLOAD
# =========================
class JobsApiPayload(BaseModel):
    companySkills: bool = True
    dismissedListingHashes: List[str] = Field(default_factory=list)
    fetchJobDesc: bool = True
    jobTitle: str = "Business Analyst"
    locations: List[str] = Field(default_factory=list)
    numJobs: int = 20
    previousListingHashes: List[str] = Field(default_factory=list)


# =========================
# UPSTREAM RESPONSE
# =========================
class UpstreamJobsResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    jobs: List[Job]


# =========================
# PROXY RESPONSE
# =========================
class JobsApiResponse(BaseModel):
    success: bool
    message: Optional[str] = None
    jobs: List[Job] = Field(default_factory=list)


# =========================
# DISPLAY RECORD
# =========================
class JobCard(BaseModel):
    job_id: int
    job_title: str
    company_name: str
    description: str
    url: str
