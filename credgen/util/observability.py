"""Observability configuration using Logfire.

Usage:
    import logfire

    # Structured logging - never pass credential values
    logfire.info("Credentials generated", id_prefix=prefix, encoding=encoding)

    # Manual spans around generation
    with logfire.span("generate_credentials", id_prefix=prefix):
        ...
"""

import sys
from typing import Any

import logfire

from credgen.config import Settings
from credgen.util.version import get_version

# Span attributes that describe option values and output sizes only. Their
# names ("secret_length") or values ("oauth") trip the default scrubber.
SAFE_ATTRIBUTES = frozenset(
    {
        "id_prefix",
        "id_length",
        "secret_length",
        "encoding",
        "client_id_length",
        "client_secret_length",
    }
)


def keep_safe_attributes(match: logfire.ScrubMatch) -> Any:
    """Scrubbing callback that keeps the generation option attributes.

    Returning None lets Logfire redact the value as usual.
    """
    if match.path and match.path[-1] in SAFE_ATTRIBUTES:
        return match.value
    return None


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the command-line tool.

    - Console output only in debug mode, and on stderr, so normal and
      ``--json`` output on stdout stay free of log lines
    - Cloud sending only with a token or an explicit opt-in

    Args:
        settings: Application settings
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "credgen",
        "service_version": get_version() or "unknown",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": (
            logfire.ConsoleOptions(
                colors="auto",
                span_style="show-parents",
                include_timestamps=True,
                verbose=True,
                output=sys.stderr,
            )
            if settings.debug
            else False
        ),
        "scrubbing": logfire.ScrubbingOptions(callback=keep_safe_attributes),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.debug(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )
