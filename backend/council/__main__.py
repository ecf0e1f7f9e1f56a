"""Run the Student Council API with uvicorn: `python -m council`."""

import argparse

import uvicorn

from council.config import settings


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the Student Council API.")
    parser.add_argument(
        "--host",
        type=str,
        default=settings.host,
        help="Host to bind (default: HOST or 0.0.0.0).",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help="Port to bind (default: PORT or 3000).",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development.",
    )
    args = parser.parse_args()

    # One worker only: the store lives in this process's memory
    uvicorn.run(
        "council.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=1,
    )


if __name__ == "__main__":
    main()
