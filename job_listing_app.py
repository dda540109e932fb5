import logging
from html import escape

import streamlit as st

from backend.config import configure_logging, validate_env
from backend.engine.fetchers import load_listing_jobs
from backend.engine.search_engine import DEFAULT_PAYLOAD
from backend.engine.view_state import ListingView, open_listing

configure_logging()
validate_env()

logger = logging.getLogger(__name__)

# =========================================================
# 1. PAGE CONFIG & STYLES
# =========================================================
st.set_page_config(page_title="Jobs Listing", layout="centered")

st.markdown("""
<style>
    .job-link { text-decoration: none !important; color: inherit !important; }
    .job-card {
        margin: 15px 0;
        padding: 20px 30px;
        border: 1px solid #ccc;
        border-radius: 5px;
        display: flex;
        align-items: flex-start;
        box-shadow: 0 15px 20px -19px rgba(0,0,0,0.2);
        cursor: pointer;
        transition: 0.3s;
    }
    .job-card:hover { background-color: #f7f8f9; }
    .job-card:hover .job-title { color: #3071c0; }
    .job-head { width: 30%; margin-right: 2%; text-align: center; }
    .job-title { font-size: 22px; font-weight: 700; color: #333; }
    .job-company { font-size: 17px; color: #333; font-weight: 500; margin-top: 10px; }
    .job-description {
        width: 70%;
        font-size: 15px;
        color: #333;
        text-align: justify;
        overflow: hidden;
        display: -webkit-box;
        -webkit-line-clamp: 3;
        -webkit-box-orient: vertical;
    }
    @media (max-width: 768px) {
        .job-card { flex-direction: column; padding: 20px 10px; }
        .job-head, .job-description { width: 100%; }
    }
</style>
""", unsafe_allow_html=True)


# =========================================================
# 2. SESSION STATE (fetched once per session)
# =========================================================
def get_view() -> ListingView:
    if "listing_view" not in st.session_state:
        jobs = load_listing_jobs(DEFAULT_PAYLOAD)
        logger.info("Listing page loaded with %d jobs", len(jobs))
        st.session_state["listing_view"] = ListingView(jobs)
    return st.session_state["listing_view"]


def card_html(card) -> str:
    # no leading indentation, markdown would turn it into a code block
    return (
        open_listing(card.url)
        + '<div class="job-card"><div class="job-head">'
        + f'<div class="job-title">{escape(card.job_title)}</div>'
        + f'<div class="job-company">{escape(card.company_name)}</div>'
        + '</div>'
        + f'<div class="job-description">{escape(card.description)}</div>'
        + '</div></a>'
    )


# =========================================================
# 3. UI LAYOUT
# =========================================================
view = get_view()

st.title("Jobs Listing")

c1, c2, c3 = st.columns(3)
c1.button("Reset Filters", on_click=view.reset, use_container_width=True)
c2.button("Filter by Recent", on_click=view.filter_by_recent, use_container_width=True)
c3.button(view.sort_button_label, on_click=view.toggle_sort, use_container_width=True)

cards = view.render()
if not view.all_jobs:
    st.info("No jobs available right now. Try again later.")

for card in cards:
    st.markdown(card_html(card), unsafe_allow_html=True)
