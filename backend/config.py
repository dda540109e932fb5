import logging
import os
from urllib.parse import urlparse

from dotenv import load_dotenv

load_dotenv()

# =========================================================
# CONSTANT ENDPOINTS
# =========================================================
ZIPPIA_JOBS_API = "https://www.zippia.com/api/jobs/"


# =========================================================
# SETTINGS (read at call time so tests can monkeypatch env)
# =========================================================
def jobs_api_url() -> str:
    return os.getenv("JOBS_API_URL") or ZIPPIA_JOBS_API


def jobs_proxy_url():
    """Proxy route the listing page loads through, or None to hit upstream."""
    return os.getenv("JOBS_PROXY_URL") or None


def jobs_api_timeout():
    raw = os.getenv("JOBS_API_TIMEOUT")
    if not raw:
        return None
    return float(raw)


def api_host() -> str:
    return os.getenv("API_HOST") or "127.0.0.1"


def api_port() -> int:
    return int(os.getenv("API_PORT") or 8000)


def log_level() -> str:
    return (os.getenv("LOG_LEVEL") or "INFO").upper()


# =========================================================
# SAFETY CHECK (fail fast)
# =========================================================
def _is_http_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_env():
    problems = []

    if not _is_http_url(jobs_api_url()):
        problems.append("JOBS_API_URL")

    proxy = jobs_proxy_url()
    if proxy and not _is_http_url(proxy):
        problems.append("JOBS_PROXY_URL")

    try:
        timeout = jobs_api_timeout()
    except ValueError:
        problems.append("JOBS_API_TIMEOUT")
    else:
        if timeout is not None and timeout <= 0:
            problems.append("JOBS_API_TIMEOUT")

    try:
        port = api_port()
    except ValueError:
        problems.append("API_PORT")
    else:
        if not 0 < port < 65536:
            problems.append("API_PORT")

    if problems:
        raise RuntimeError(
            f"Invalid environment variables: {', '.join(problems)}"
        )


# =========================================================
# LOGGING
# =========================================================
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging():
    root = logging.getLogger()
    level = log_level()
    # unknown names (LOG_LEVEL=verbose) fall back to INFO
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"
    root.setLevel(level)

    # Streamlit reruns the page script; only attach our handler once.
    if not any(getattr(h, "_jobs_board", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._jobs_board = True
        root.addHandler(handler)
