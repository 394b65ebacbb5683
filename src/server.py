"""Uvicorn runner for the Counter service.

Binds to HOST/APP_PORT from the environment unless overridden.

Usage:
    python src/server.py
    python src/server.py --port 8080 --reload
"""

import argparse

import uvicorn

from counter.settings import Settings


def main():
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(description="Counter API server")
    parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.app_port, help=f"Bind port (default: {settings.app_port})")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    uvicorn.run("app:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
