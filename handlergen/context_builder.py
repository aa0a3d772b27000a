"""Build the Jinja2 template context from the decoded discovery document.

Walks every (resource, method) pair, derives its path, verb and handler
name, and sorts the result by handler name so output is reproducible.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .errors import DuplicateHandlerError
from .loader import APIDescription, iter_methods
from .naming import build_handler_name, resolve_path

logger = logging.getLogger(__name__)

# Marker name written into the generated file header
GENERATOR_NAME = "handlergen"


@dataclass(frozen=True)
class HandlerDescriptor:
    """One generated handler: where it is mounted and what it is called."""

    path: str
    http_method: str
    handler_name: str


def build_handlers(api: APIDescription) -> list[HandlerDescriptor]:
    """Derive one descriptor per API method, sorted by handler name."""
    handlers: list[HandlerDescriptor] = []
    origins: dict[str, str] = {}

    for resource_name, method_name, method in iter_methods(api):
        name = build_handler_name(resource_name, method_name)
        origin = f"{resource_name}.{method_name}"
        if name in origins:
            raise DuplicateHandlerError(name, origins[name], origin)
        origins[name] = origin

        handlers.append(
            HandlerDescriptor(
                path=resolve_path(method),
                http_method=method.http_method,
                handler_name=name,
            )
        )

    # str ordering is by code point, matching byte order for the ASCII
    # names discovery documents use
    handlers.sort(key=lambda h: h.handler_name)
    return handlers


def build_context(api: APIDescription) -> dict[str, Any]:
    """Build the full template context from the discovery document."""
    handlers = build_handlers(api)
    logger.debug("Enumerated %d handlers from %d resources", len(handlers), len(api.resources))
    return {
        "handlers": handlers,
        "handler_count": len(handlers),
        "generator": GENERATOR_NAME,
    }
