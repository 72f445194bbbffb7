"""Entry point for running the ApiKey Service backend.

Usage:
    python run_server.py --port 8000 [--host 0.0.0.0] [--log-level debug]
"""

import argparse

LOG_LEVELS = ["critical", "error", "warning", "info", "debug", "trace"]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="ApiKey Service Backend")
    parser.add_argument("--host", type=str, default="127.0.0.1", help="Interface to bind to")
    parser.add_argument("--port", type=int, required=True, help="Port to bind to")
    parser.add_argument(
        "--log-level", type=str, default="info", choices=LOG_LEVELS, help="Uvicorn log level"
    )
    args = parser.parse_args(argv)

    import uvicorn
    from app.main import app

    uvicorn.run(
        app,
        host=args.host,
        port=args.port,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
