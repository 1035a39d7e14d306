"""
Logging configuration for the pet store service.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  It is safe to call repeatedly; only the
first call installs handlers, which matters when tests build several
applications in one process.

``log_requests`` is an HTTP middleware that writes one line per
request with the method, path, response status and elapsed time.
Because it covers the same ground, uvicorn's own access log is
silenced once the middleware is in place.
"""

import logging
import time
from pathlib import Path
from typing import Awaitable, Callable, Optional

from fastapi import Request, Response

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

request_logger = logging.getLogger("pet_store_api.requests")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to append log records to.  Relative paths are
        resolved against the current working directory.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logging.getLogger("uvicorn.access").disabled = True


async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Log method, path, status and duration of every request."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    request_logger.info(
        '"%s %s" %s in %.2fms',
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response
