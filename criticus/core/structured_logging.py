"""Structured logging helpers (PII-safe)."""

import logging
from typing import Any


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the API process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )


def build_log_context(
    *,
    kind: str | None = None,
    submission_id: str | None = None,
    route: str | None = None,
    method: str | None = None,
    fields: list[str] | None = None,
) -> dict[str, Any]:
    """Return a PII-safe log context dict.

    Names and email addresses never go in here; failing field names do.
    """
    context: dict[str, Any] = {}
    if kind:
        context["kind"] = kind
    if submission_id:
        context["submission_id"] = submission_id
    if route:
        context["route"] = route
    if method:
        context["method"] = method
    if fields:
        context["fields"] = sorted(fields)
    return context
