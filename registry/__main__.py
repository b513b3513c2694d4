from __future__ import annotations

import argparse
import logging

import uvicorn

from registry.config import get_settings
from registry.observability.logging import configure_logging

logger = logging.getLogger("registry")


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="In-memory user registry HTTP service")
    parser.add_argument("--host", default=settings.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on")
    parser.add_argument("--log-level", default=settings.log_level, help="Root log level")
    args = parser.parse_args()

    configure_logging(args.log_level)
    display_host = "localhost" if args.host in {"0.0.0.0", ""} else args.host
    logger.info("server.start", extra={"url": f"http://{display_host}:{args.port}"})

    uvicorn.run("registry.main:app", host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()
