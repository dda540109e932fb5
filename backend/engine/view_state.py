"""
Listing page state.

The page holds one ListingView per session. Every button maps to one method
here, and every method rebuilds ``displayed_jobs`` from the full ``all_jobs``
list, so transforms never stack on top of each other.
"""

from html import escape
from typing import List, Optional, Sequence

from backend.schemas import Job, JobCard
from backend.utils.helpers import collation_key, days_since, strip_html_tags

DEFAULT_LIMIT = 10
RECENT_DAYS = 7

STATE_DEFAULT = "default"
STATE_RECENT = "recent"
STATE_SORTED = "sorted"


class ListingView:
    def __init__(self, jobs: Sequence[Job]):
        self.all_jobs = tuple(jobs)
        self.displayed_jobs: List[Job] = []
        self.is_sorted_by_company = False
        self.state = STATE_DEFAULT
        self.reset()

    # -------------------------
    # Button actions
    # -------------------------
    def reset(self):
        self.displayed_jobs = list(self.all_jobs[:DEFAULT_LIMIT])
        self.is_sorted_by_company = False
        self.state = STATE_DEFAULT

    def filter_by_recent(self, now=None):
        """Keep postings at most RECENT_DAYS old; unparseable dates drop out."""
        recent = []
        for job in self.all_jobs:
            age = days_since(job.postingDate, now)
            if age is not None and age <= RECENT_DAYS:
                recent.append(job)

        self.displayed_jobs = recent
        self.is_sorted_by_company = False
        self.state = STATE_RECENT

    def toggle_sort(self):
        if not self.is_sorted_by_company:
            # sorted() is stable, equal company names keep upstream order
            self.displayed_jobs = sorted(
                self.all_jobs, key=lambda j: collation_key(j.companyName)
            )
            self.is_sorted_by_company = True
            self.state = STATE_SORTED
        else:
            self.displayed_jobs = list(self.all_jobs)
            self.is_sorted_by_company = False
            self.state = STATE_DEFAULT

    @property
    def sort_button_label(self) -> str:
        if self.is_sorted_by_company:
            return "Sort by Posting Date"
        return "Sort by Company"

    # -------------------------
    # Rendering
    # -------------------------
    def render(self) -> List[JobCard]:
        return [
            JobCard(
                job_id=job.jobId,
                job_title=job.jobTitle,
                company_name=job.companyName,
                description=strip_html_tags(job.jobDescription),
                url=job.obj_url,
            )
            for job in self.displayed_jobs
        ]


def open_listing(url: Optional[str]) -> str:
    """Opening anchor tag that sends the browser to ``url`` in a new tab."""
    return f'<a href="{escape(url or "", quote=True)}" target="_blank" rel="noopener noreferrer">'
