"""Load an OpenAPI/Swagger document and read its top-level metadata.

JSON and YAML documents are both accepted; the core only ever sees the
resulting mapping.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping
from urllib.parse import urlparse

import yaml

from .errors import InvalidSpecificationError


@dataclass(frozen=True)
class ApiInfo:
    """Document metadata used for the generated scaffolding."""

    title: str | None = None
    version: str | None = None
    base_path: str | None = None
    host: str | None = None


def load_spec(path: Path) -> dict[str, Any]:
    """Load a specification from disk."""
    with open(path, encoding="utf-8") as f:
        if path.suffix == ".json":
            spec = json.load(f)
        else:
            spec = yaml.safe_load(f)
    if not isinstance(spec, dict):
        raise InvalidSpecificationError(f"{path} does not contain an API document")
    return spec


def require_spec(spec: Any) -> Mapping[str, Any]:
    """Reject a missing or non-mapping specification."""
    if spec is None:
        raise InvalidSpecificationError("specification is required")
    if not isinstance(spec, Mapping):
        raise InvalidSpecificationError(
            f"specification must be a mapping, got {type(spec).__name__}"
        )
    return spec


def get_paths(spec: Mapping[str, Any]) -> Mapping[str, Any]:
    """Extract paths from the spec."""
    paths = spec.get("paths") or {}
    if not isinstance(paths, Mapping):
        raise InvalidSpecificationError("'paths' must be a mapping")
    return paths


def resolve_ref(spec: Mapping[str, Any], ref: str) -> Any:
    """Resolve a local $ref pointer in the spec."""
    if not ref.startswith("#/"):
        raise InvalidSpecificationError(f"only local references are supported: {ref}")
    node: Any = spec
    for part in ref[2:].split("/"):
        part = part.replace("~1", "/").replace("~0", "~")
        try:
            node = node[part]
        except (KeyError, TypeError):
            raise InvalidSpecificationError(f"unresolvable reference: {ref}") from None
    return node


def resolve_node(spec: Mapping[str, Any], node: Any, kind: str = "node") -> Mapping[str, Any]:
    """Follow $ref chains until a mapping without $ref is reached."""
    seen: set[str] = set()
    while isinstance(node, Mapping) and "$ref" in node:
        ref = node["$ref"]
        if ref in seen:
            raise InvalidSpecificationError(f"circular reference: {ref}")
        seen.add(ref)
        node = resolve_ref(spec, ref)
    if not isinstance(node, Mapping):
        raise InvalidSpecificationError(f"{kind} must be a mapping, got {node!r}")
    return node


def _server_base_path(spec: Mapping[str, Any]) -> str | None:
    servers = spec.get("servers") or []
    if not servers or not isinstance(servers[0], Mapping):
        return None
    path = urlparse(servers[0].get("url", "")).path.rstrip("/")
    return path or None


def _server_host(spec: Mapping[str, Any]) -> str | None:
    servers = spec.get("servers") or []
    if not servers or not isinstance(servers[0], Mapping):
        return None
    return urlparse(servers[0].get("url", "")).netloc or None


def get_info(spec: Mapping[str, Any]) -> ApiInfo:
    """Read title, version, base path and host.

    Swagger 2 keeps these in basePath/host, OpenAPI 3 in servers[0].url.
    """
    info = spec.get("info") or {}
    title = info.get("title")
    version = info.get("version")
    return ApiInfo(
        title=str(title) if title is not None else None,
        version=str(version) if version is not None else None,
        base_path=spec.get("basePath") or _server_base_path(spec),
        host=spec.get("host") or _server_host(spec),
    )
