"""structlog configuration shared by the CLI and embedding applications.

Applications should call configure_logging() once at startup. When they
do not, the first ProcessRunner calls ensure_logging(), which applies the
same configuration without replacing handlers the application already
installed on the root logger. Either way log output goes to stderr, never
to stdout.
"""

import logging
import sys

import structlog


def configure_logging(level: str = "INFO", fmt: str = "console", force: bool = True) -> None:
    """Route structlog through stdlib logging on stderr.

    Args:
        level: Standard logging level name.
        fmt: "json" for JSON lines, anything else for console rendering.
        force: Replace existing root handlers. When False, an already
            configured root logger is left untouched.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        stream=sys.stderr,
        force=force,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def ensure_logging() -> None:
    """Configure logging with defaults unless structlog is already configured."""
    if not structlog.is_configured():
        configure_logging(force=False)
