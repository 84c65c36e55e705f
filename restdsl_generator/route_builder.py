"""Translate a parsed specification into route rules.

Walks paths and methods in the order the document declares them and
produces exactly one RouteRule per operation. Nothing is sorted, merged
or dropped.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Any, Iterator, Mapping

from .errors import ConfigurationError, InvalidSpecificationError
from .loader import get_paths, require_spec, resolve_node
from .naming import DestinationGenerator
from .parameters import RuleParam, parse_parameters, strip_html

logger = logging.getLogger(__name__)

HTTP_METHODS = frozenset(
    {"get", "put", "post", "delete", "options", "head", "patch", "trace"}
)


@dataclass(frozen=True)
class RouteRule:
    """One operation bound to the destination it is routed to."""

    method: str
    path: str
    destination: str
    consumes: tuple[str, ...] = ()
    produces: tuple[str, ...] = ()
    operation_id: str | None = None
    description: str | None = None
    params: tuple[RuleParam, ...] = ()


def _media_types(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def _content_types(content: Any) -> list[str]:
    if isinstance(content, Mapping):
        return list(content)
    return []


def resolve_consumes(spec: Mapping[str, Any], operation: Mapping[str, Any]) -> tuple[str, ...]:
    """Operation-level media types if declared, else the global default."""
    if "consumes" in operation:
        return _media_types(operation["consumes"])
    request_body = operation.get("requestBody")
    if request_body is not None:
        request_body = resolve_node(spec, request_body, "request body")
    if request_body is not None and "content" in request_body:
        return tuple(_content_types(request_body["content"]))
    return _media_types(spec.get("consumes"))


def resolve_produces(spec: Mapping[str, Any], operation: Mapping[str, Any]) -> tuple[str, ...]:
    """Operation-level media types if declared, else the global default."""
    if "produces" in operation:
        return _media_types(operation["produces"])
    declared: list[str] = []
    responses = operation.get("responses") or {}
    if isinstance(responses, Mapping):
        for response in responses.values():
            response = resolve_node(spec, response, "response")
            for media_type in _content_types(response.get("content")):
                if media_type not in declared:
                    declared.append(media_type)
    if declared:
        return tuple(declared)
    return _media_types(spec.get("produces"))


def _make_description(operation: Mapping[str, Any]) -> str | None:
    text = operation.get("summary") or operation.get("description")
    if not text:
        return None
    return strip_html(text) or None


def iter_operations(
    spec: Mapping[str, Any],
) -> Iterator[tuple[str, str, Mapping[str, Any], Mapping[str, Any]]]:
    """Yield (path, method, path_item, operation) in declared order."""
    for path, path_item in get_paths(spec).items():
        if not isinstance(path_item, Mapping):
            raise InvalidSpecificationError(f"path item for {path!r} must be a mapping")
        for method, operation in path_item.items():
            if method.lower() not in HTTP_METHODS:
                continue
            if not isinstance(operation, Mapping):
                raise InvalidSpecificationError(
                    f"operation {method.upper()} {path} must be a mapping"
                )
            yield path, method, path_item, operation


def _destination(
    destination_generator: DestinationGenerator, operation: Mapping[str, Any]
) -> str:
    destination = destination_generator(operation)
    if not isinstance(destination, str) or not destination:
        raise ConfigurationError(
            f"destination generator returned {destination!r}, expected a non-empty string"
        )
    return destination


def _warn_duplicate_destinations(rules: tuple[RouteRule, ...]) -> None:
    counts = Counter(rule.destination for rule in rules)
    for destination, count in counts.items():
        if count > 1:
            logger.warning("destination %s is shared by %d operations", destination, count)


def translate(
    spec: Any, destination_generator: DestinationGenerator
) -> tuple[RouteRule, ...]:
    """Build the route rules for every operation in the spec."""
    spec = require_spec(spec)
    rules = tuple(
        RouteRule(
            method=method,
            path=path,
            destination=_destination(destination_generator, operation),
            consumes=resolve_consumes(spec, operation),
            produces=resolve_produces(spec, operation),
            operation_id=operation.get("operationId") or None,
            description=_make_description(operation),
            params=parse_parameters(spec, path_item, operation),
        )
        for path, method, path_item, operation in iter_operations(spec)
    )
    _warn_duplicate_destinations(rules)
    logger.debug("translated %d operations", len(rules))
    return rules
