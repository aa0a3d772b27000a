"""Entry point: python -m handlergen

Reads the bundled handlergen/spec/bigquery-api.json, generates server/handler_gen.py.
"""

from __future__ import annotations

import logging
import sys

from .codegen import generate
from .context_builder import build_context
from .errors import GeneratorError
from .loader import load_spec

logger = logging.getLogger("handlergen")


def run() -> None:
    api = load_spec()
    context = build_context(api)
    generate(context)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    try:
        run()
    except GeneratorError:
        logger.exception("generation failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
