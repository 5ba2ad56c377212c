#!/usr/bin/env python3
"""
Gacha - Entry point for running the web server.

Usage:
    python main.py                  # Serve on PORT (default 3000)
    python main.py --port 8080      # Override the port
"""

import argparse
import logging

import uvicorn

from gacha.config import get_settings


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Gacha web server")
    parser.add_argument("--host", default=settings.host, help="Web server host")
    parser.add_argument("--port", type=int, default=settings.port, help="Web server port")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger = logging.getLogger(__name__)

    logger.info(f"Server running at http://localhost:{args.port}/")
    uvicorn.run("gacha.app:app", host=args.host, port=args.port, reload=args.reload, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
