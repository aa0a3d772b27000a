"""Load and decode the bundled API discovery document.

Reads handlergen/spec/bigquery-api.json into resources -> methods -> parameters.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import DecodeError

SPEC_PATH = Path(__file__).parent / "spec" / "bigquery-api.json"


class _Model(BaseModel):
    model_config = ConfigDict(
        extra="ignore", frozen=True, populate_by_name=True, strict=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        """Treat JSON null like an absent field, so defaults apply."""
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Parameter(_Model):
    type: str = ""
    location: str = ""
    required: bool = False


class Method(_Model):
    http_method: str = Field("", alias="httpMethod")
    parameters: dict[str, Parameter] = Field(default_factory=dict)
    path: str = ""
    flat_path: str = Field("", alias="flatPath")
    scopes: list[str] = Field(default_factory=list)


class Resource(_Model):
    methods: dict[str, Method] = Field(default_factory=dict)


class APIDescription(_Model):
    resources: dict[str, Resource] = Field(default_factory=dict)


def parse_spec(raw: bytes | str) -> APIDescription:
    """Decode a discovery document, rejecting malformed JSON or shape."""
    try:
        return APIDescription.model_validate_json(raw)
    except ValidationError as exc:
        raise DecodeError(f"invalid discovery document: {exc}") from exc


def load_spec(path: Path | None = None) -> APIDescription:
    """Load the discovery document from disk."""
    spec_file = path or SPEC_PATH
    try:
        raw = spec_file.read_bytes()
    except OSError as exc:
        raise DecodeError(f"cannot read {spec_file}: {exc}") from exc
    return parse_spec(raw)


def iter_methods(api: APIDescription) -> Iterator[tuple[str, str, Method]]:
    """Yield (resource_name, method_name, method) for every API method."""
    for resource_name, resource in api.resources.items():
        for method_name, method in resource.methods.items():
            yield resource_name, method_name, method
