"""Render templates and write generated output.

Takes the context from context_builder and produces server/handler_gen.py.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Any

import black
import jinja2

from .errors import FormatError, TemplateError, WriteError

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "handler_gen.py.j2"
OUTPUT_PATH = Path(__file__).parent.parent / "server" / "handler_gen.py"


def render(context: dict[str, Any], template_dir: Path | None = None) -> str:
    """Render the handler template against the context."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(template_dir or TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    try:
        template = env.get_template(TEMPLATE_NAME)
        return template.render(**context)
    except jinja2.TemplateError as exc:
        raise TemplateError(f"cannot render {TEMPLATE_NAME}: {exc}") from exc


def format_source(source: str) -> str:
    """Canonicalize rendered Python source with black."""
    try:
        return black.format_str(source, mode=black.Mode())
    except black.InvalidInput as exc:
        raise FormatError(f"rendered source does not parse: {exc}") from exc


def write_output(source: str, path: Path = OUTPUT_PATH) -> None:
    """Replace the file at path with source, all or nothing."""
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(source)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise WriteError(f"cannot write {path}: {exc}") from exc


def generate(
    context: dict[str, Any],
    output_path: Path = OUTPUT_PATH,
    template_dir: Path | None = None,
) -> Path:
    """Render, format and write the handler module."""
    output = format_source(render(context, template_dir))
    write_output(output, output_path)

    logger.info("Generated %s (%d handlers)", output_path, context["handler_count"])
    return output_path
