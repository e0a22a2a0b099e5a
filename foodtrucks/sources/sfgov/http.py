import logging
import time

import httpx

from foodtrucks.core.config import FinderConfig
from foodtrucks.core.errors import NetworkError

logger = logging.getLogger(__name__)


def configure_logging_if_needed(level: str = "WARNING") -> None:
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def log_request(request: httpx.Request) -> None:
    logger.debug("HTTP %s %s", request.method, request.url)


def make_client(cfg: FinderConfig, *, transport: httpx.BaseTransport | None = None) -> httpx.Client:
    return httpx.Client(
        timeout=httpx.Timeout(cfg.timeout),
        headers={"Accept": "application/json"},
        follow_redirects=True,
        event_hooks={"request": [log_request]},
        transport=transport,
    )


def get_text(client: httpx.Client, url: str) -> str:
    """Single GET, no retry. Any transport or status failure becomes NetworkError."""
    t0 = time.perf_counter()
    try:
        r = client.get(url)
        r.raise_for_status()
        body = r.text
    except httpx.HTTPStatusError as e:
        snippet = (e.response.text or "")[:300]
        logger.error("HTTP %d GET %s body_snippet=%r", e.response.status_code, url, snippet)
        raise NetworkError(f"Server returned HTTP {e.response.status_code} for {url}") from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error("GET %s failed after %.2fs: %r", url, time.perf_counter() - t0, e)
        raise NetworkError(f"Request to {url} failed: {e.__class__.__name__}: {e}") from e

    logger.debug("GET %s completed in %.2fs status=%d bytes=%d", url, time.perf_counter() - t0, r.status_code, len(body))
    return body
