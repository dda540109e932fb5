import math
import re
import unicodedata
from datetime import datetime, timezone

import pandas as pd

SECONDS_PER_DAY = 24 * 3600

# Non-greedy up to the first ">"; an unclosed "<" never matches.
_TAG_RE = re.compile(r"(<([^>]+)>)", re.IGNORECASE)


def strip_html_tags(text):
    if not text:
        return ""
    return _TAG_RE.sub("", text)


def parse_date(val):
    """
    Parse a posting date into a UTC-aware timestamp.
    Anything unparseable comes back as None.
    """
    if val is None or val == "":
        return None
    try:
        ts = pd.to_datetime(val, utc=True, errors="coerce")
    except (TypeError, ValueError, OverflowError):
        return None
    if ts is None or pd.isna(ts):
        return None
    return ts.to_pydatetime()


def utc_now():
    return datetime.now(timezone.utc)


def days_since(val, now=None):
    """Whole days (rounded up) between the posting date and now, or None."""
    posted = parse_date(val)
    if posted is None:
        return None
    now = now or utc_now()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return math.ceil((now - posted).total_seconds() / SECONDS_PER_DAY)


def collation_key(text):
    """
    Sort key approximating a browser's localeCompare: accents and case are
    ignored first, then lowercase sorts before uppercase.
    """
    text = text or ""
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return (base.casefold(), text.swapcase())
