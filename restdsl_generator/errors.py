"""Exceptions raised while translating a specification into routes."""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for all generator failures."""


class InvalidSpecificationError(GeneratorError, ValueError):
    """The specification is missing or cannot be translated."""


class ConfigurationError(GeneratorError, ValueError):
    """A generator option was given an unusable value."""


class RouteDefinitionError(GeneratorError):
    """The route DSL was used out of order."""
