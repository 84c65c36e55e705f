"""Extract pass-through parameter declarations from operations.

Handles:
- Path-level parameters shared by every operation of a path
- Operation parameters overriding path-level ones with the same (name, in)
- $ref resolution against the document
- Swagger 2 inline types and OpenAPI 3 schema types
- HTML stripping in descriptions

Request bodies and security requirements are not reinterpreted.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping

from .errors import InvalidSpecificationError
from .loader import resolve_node


@dataclass(frozen=True)
class RuleParam:
    name: str
    kind: str
    required: bool = False
    data_type: str | None = None
    description: str | None = None


def strip_html(text: str) -> str:
    """Strip HTML tags and collapse whitespace."""
    text = re.sub(r"<[^>]+>", "", text)
    text = re.sub(r"\s+", " ", text).strip()
    return text


def resolve_param_type(spec: Mapping[str, Any], param: Mapping[str, Any]) -> str | None:
    """Return the declared type of a parameter, if any."""
    if "type" in param:
        return param["type"]
    schema = param.get("schema")
    if not schema:
        return None
    schema = resolve_node(spec, schema, "schema")
    return schema.get("type")


def _to_rule_param(spec: Mapping[str, Any], param: Mapping[str, Any]) -> RuleParam:
    name = param.get("name")
    kind = param.get("in")
    if not name or not kind:
        raise InvalidSpecificationError(f"parameter without name or location: {dict(param)!r}")
    description = param.get("description")
    if description:
        description = strip_html(description) or None
    return RuleParam(
        name=name,
        kind=kind,
        # path parameters are always required
        required=bool(param.get("required", False)) or kind == "path",
        data_type=resolve_param_type(spec, param),
        description=description,
    )


def parse_parameters(
    spec: Mapping[str, Any],
    path_item: Mapping[str, Any],
    operation: Mapping[str, Any],
) -> tuple[RuleParam, ...]:
    """Merge path-level and operation-level parameters, keeping declared order."""
    merged: dict[tuple[str, str], RuleParam] = {}
    for source in (path_item.get("parameters") or [], operation.get("parameters") or []):
        for raw in source:
            param = _to_rule_param(spec, resolve_node(spec, raw, "parameter"))
            merged[(param.name, param.kind)] = param
    return tuple(merged.values())
