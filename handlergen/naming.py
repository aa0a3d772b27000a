"""Derive handler names and request paths from discovery methods.

Pattern: {resource}{Method}
  - resource name is kept verbatim, casing included
  - only the first character of the method name is upper-cased

Examples:
  jobs     + insert   -> jobsInsert
  tables   + get      -> tablesGet
  tabledata + insertAll -> tabledataInsertAll
  rowAccessPolicies + getIamPolicy -> rowAccessPoliciesGetIamPolicy

Paths prefer the flat path (no {+param} expansions) and always start with /.
"""

from __future__ import annotations

from .errors import DecodeError
from .loader import Method


def build_handler_name(resource_name: str, method_name: str) -> str:
    """Build the handler name for a resource method.

    Returns a name like 'jobsInsert' or 'tablesGet'.
    """
    if not method_name:
        raise DecodeError(f"resource {resource_name!r} has a method with an empty name")
    return resource_name + method_name[0].upper() + method_name[1:]


def normalize_path(path: str) -> str:
    """Ensure a path template starts with a leading slash."""
    if not path.startswith("/"):
        path = "/" + path
    return path


def resolve_path(method: Method) -> str:
    """Pick the flat path when present, else the primary path."""
    return normalize_path(method.flat_path or method.path)
