"""Entry point for the Pet Store API server.

Parses the command line, applies the flags to the shared settings and
serves ``pet_store_api.app.main:app``, which is built from them on
first import, with uvicorn.  Flags override the
environment variables read by ``pet_store_api.app.core.config``.

Usage:
    python run.py --datastore mem --port 4852

The process exits with status 1 if the storage backend cannot be
built.  Only the ``mem`` backend is implemented.
"""

import argparse
import logging
import sys

from uvicorn import Config, Server

from pet_store_api.app.core.config import settings
from pet_store_api.app.core.errors import StoreConfigError
from pet_store_api.app.core.logging_config import setup_logging
from pet_store_api.app.core.store import STORE_BACKENDS

logger = logging.getLogger("pet_store_api")


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Serve the pet store REST API.")
    ap.add_argument(
        "-d",
        "--datastore",
        choices=STORE_BACKENDS,
        default=settings.datastore,
        help="Storage used, one of {%(choices)s} (default: %(default)s)",
    )
    ap.add_argument("-p", "--port", type=int, default=settings.port, help="Port to listen on (default: %(default)s)")
    ap.add_argument("--host", default=settings.host, help="Interface to bind (default: %(default)s)")
    return ap.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    settings.datastore = args.datastore
    settings.port = args.port
    settings.host = args.host
    setup_logging(settings.log_level, settings.log_file or None)

    # Imported late so the module level app is built from the settings above.
    try:
        from pet_store_api.app.main import app
    except StoreConfigError as exc:
        logger.critical("Could not connect data storage. %s", exc)
        sys.exit(1)

    logger.info("Server listening on port %d", settings.port)
    server = Server(Config(app=app, host=settings.host, port=settings.port, log_level=settings.log_level.lower()))
    # uvicorn logs a failed bind and exits with status 1 on its own.
    server.run()


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
