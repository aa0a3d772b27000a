"""Shared fixtures for generator tests.

Generation runs against temporary output directories; the generated
module is imported from there so the capability assertions execute.
"""

from __future__ import annotations

import importlib.util
import json
from pathlib import Path
from types import ModuleType
from typing import Any, Callable

import pytest

from handlergen.loader import APIDescription, parse_spec


# ---------------------------------------------------------------------------
# Discovery documents
# ---------------------------------------------------------------------------

WIDGETS_SPEC: dict[str, Any] = {
    "resources": {
        "widgets": {
            "methods": {
                "list": {"httpMethod": "GET", "path": "widgets"},
            }
        }
    }
}


@pytest.fixture
def make_api() -> Callable[[dict[str, Any]], APIDescription]:
    """Decode a discovery document given as a dict."""
    def _make(doc: dict[str, Any]) -> APIDescription:
        return parse_spec(json.dumps(doc))
    return _make


@pytest.fixture
def widgets_api(make_api) -> APIDescription:
    return make_api(WIDGETS_SPEC)


# ---------------------------------------------------------------------------
# Generated module loader
# ---------------------------------------------------------------------------

@pytest.fixture
def output_path(tmp_path: Path) -> Path:
    """Destination for generated output inside a temp directory."""
    return tmp_path / "handler_gen.py"


@pytest.fixture
def import_generated() -> Callable[[Path], ModuleType]:
    """Import a generated handler module from an arbitrary path.

    Importing runs every assert_handler() call in the module.
    """
    def _import(path: Path) -> ModuleType:
        spec = importlib.util.spec_from_file_location("handler_gen_under_test", path)
        assert spec is not None and spec.loader is not None
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module
    return _import
