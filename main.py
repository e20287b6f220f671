"""Main entry point for the event collector."""

import argparse
from dataclasses import replace
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from eventsink import Application, create_fastapi_app, load_settings
from eventsink.config import Settings, parse_port
from eventsink.logging_config import setup_logging


def parse_args(settings: Settings, argv: list[str] | None = None) -> Settings:
    """Apply command line flags on top of environment settings."""
    parser = argparse.ArgumentParser(description="Management event collector")
    parser.add_argument("--host", default=settings.host, help="Address to bind")
    parser.add_argument("--port", type=parse_port, default=settings.port, help="Port to listen on")
    parser.add_argument("--use-tls", action="store_true", default=settings.use_tls, help="Use TLS")
    parser.add_argument("--user", default=settings.username, help="Username for auth")
    parser.add_argument("--password", default=settings.password, help="Password for auth")
    parser.add_argument("--log-level", default=settings.log_level, help="Log level")
    args = parser.parse_args(argv)
    return replace(
        settings,
        host=args.host,
        port=args.port,
        use_tls=args.use_tls,
        username=args.user,
        password=args.password,
        log_level=args.log_level.upper(),
    )


def main(argv: list[str] | None = None):
    """Run the collector."""
    project_root = Path(__file__).resolve().parent
    load_dotenv(project_root / ".env")

    settings = parse_args(load_settings(), argv)
    setup_logging(settings.log_level, settings.log_file)

    app = create_fastapi_app(Application(settings))

    ssl_options = {}
    if settings.use_tls:
        ssl_options = {
            "ssl_certfile": settings.tls_cert,
            "ssl_keyfile": settings.tls_key,
        }

    # Run with uvicorn; log_config=None keeps our JSON logging
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=settings.log_level.lower(),
        **ssl_options,
    )


if __name__ == "__main__":
    main()
