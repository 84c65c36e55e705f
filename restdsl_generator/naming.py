"""Destination and class names for generated routes.

Destinations:
  - operation with an operationId -> direct:{operationId}
  - operation without one         -> direct:rest{N}, N counting from 1

Class names are derived from info.title:
  "Swagger Petstore"   -> SwaggerPetstoreRestDslRoutes
  "3D Store API (v2)"  -> DStoreAPIv2RestDslRoutes
  missing or empty     -> RestDslRoutes
"""

from __future__ import annotations

import itertools
import keyword
import re
from typing import Any, Callable, Mapping, Optional

DIRECT_PREFIX = "direct:"
SYNTHETIC_PREFIX = "rest"
CLASS_NAME_SUFFIX = "RestDslRoutes"

DestinationGenerator = Callable[[Mapping[str, Any]], str]
ClassNameTransform = Callable[[Optional[str]], str]

_NON_IDENTIFIER = re.compile(r"[^A-Za-z0-9_]")
_PACKAGE_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")


class DirectRouteNamer:
    """Default destination strategy.

    Each instance owns its counter, so numbering starts again at 1 for
    every new namer. Operations with an identifier never consume a number.
    """

    def __init__(self) -> None:
        self._counter = itertools.count(1)

    def next_synthetic_name(self) -> str:
        return f"{SYNTHETIC_PREFIX}{next(self._counter)}"

    def __call__(self, operation: Mapping[str, Any]) -> str:
        operation_id = operation.get("operationId")
        if operation_id:
            return f"{DIRECT_PREFIX}{operation_id}"
        return f"{DIRECT_PREFIX}{self.next_synthetic_name()}"


def default_class_name(title: Any) -> str:
    """Build a class name from an API title."""
    if title is None or title == "":
        return CLASS_NAME_SUFFIX
    stem = _NON_IDENTIFIER.sub("", str(title)).lstrip("0123456789_")
    return f"{stem}{CLASS_NAME_SUFFIX}"


def is_valid_class_name(name: str) -> bool:
    """Class names must be plain ASCII identifiers and not keywords."""
    return name.isascii() and name.isidentifier() and not keyword.iskeyword(name)


def is_valid_package_name(name: str) -> bool:
    if not _PACKAGE_NAME.match(name):
        return False
    return not any(keyword.iskeyword(part) for part in name.split("."))
