# services/roster-api/app/cli/serve.py
from __future__ import annotations

import argparse
import logging

import uvicorn

from app.core.config import HOST, LOG_LEVEL, PORT

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Serve the roster sheet API.")
    parser.add_argument("--host", default=HOST, help="Bind address")
    parser.add_argument("--port", type=int, default=PORT, help="Listen port")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (dev only)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL)
    logger.info("Server is running at http://%s:%d", args.host, args.port)
    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=args.reload, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
