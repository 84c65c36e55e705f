"""Fluent REST route DSL and the definition objects it builds.

    class PetRoutes(RouteBuilder):
        def configure(self):
            rest = self.rest("/v2")
            rest.get("/pets").id("listPets").produces("application/json").to("direct:listPets")

`PetRoutes().build()` returns a RestsDefinition holding one RestDefinition
with one VerbDefinition per verb call. Modifiers apply to the most recently
added verb.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import RouteDefinitionError


@dataclass
class ParamDefinition:
    name: str
    kind: str
    required: bool = False
    data_type: str | None = None
    description: str | None = None


@dataclass
class VerbDefinition:
    method: str
    uri: str
    id: str | None = None
    description: str | None = None
    consumes: str | None = None
    produces: str | None = None
    params: list[ParamDefinition] = field(default_factory=list)
    to: str | None = None


@dataclass
class RestDefinition:
    path: str | None = None
    verbs: list[VerbDefinition] = field(default_factory=list)

    def verb(self, method: str, uri: str) -> RestDefinition:
        self.verbs.append(VerbDefinition(method=method.lower(), uri=uri))
        return self

    def get(self, uri: str) -> RestDefinition:
        return self.verb("get", uri)

    def post(self, uri: str) -> RestDefinition:
        return self.verb("post", uri)

    def put(self, uri: str) -> RestDefinition:
        return self.verb("put", uri)

    def delete(self, uri: str) -> RestDefinition:
        return self.verb("delete", uri)

    def patch(self, uri: str) -> RestDefinition:
        return self.verb("patch", uri)

    def head(self, uri: str) -> RestDefinition:
        return self.verb("head", uri)

    def options(self, uri: str) -> RestDefinition:
        return self.verb("options", uri)

    def trace(self, uri: str) -> RestDefinition:
        return self.verb("trace", uri)

    def _current(self) -> VerbDefinition:
        if not self.verbs:
            raise RouteDefinitionError("no verb defined; call get()/post()/... first")
        return self.verbs[-1]

    def id(self, route_id: str) -> RestDefinition:
        self._current().id = route_id
        return self

    def description(self, text: str) -> RestDefinition:
        self._current().description = text
        return self

    def consumes(self, media_types: str) -> RestDefinition:
        self._current().consumes = media_types
        return self

    def produces(self, media_types: str) -> RestDefinition:
        self._current().produces = media_types
        return self

    def param(
        self,
        name: str,
        kind: str,
        required: bool = False,
        data_type: str | None = None,
        description: str | None = None,
    ) -> RestDefinition:
        self._current().params.append(
            ParamDefinition(name, kind, required, data_type, description)
        )
        return self

    def to(self, uri: str) -> RestDefinition:
        self._current().to = uri
        return self


@dataclass
class RestsDefinition:
    rests: list[RestDefinition] = field(default_factory=list)

    def rest(self, path: str | None = None) -> RestDefinition:
        definition = RestDefinition(path=path)
        self.rests.append(definition)
        return definition


class RouteBuilder:
    """Base class for route modules; subclasses fill in configure()."""

    def __init__(self) -> None:
        self.definitions = RestsDefinition()
        self._configured = False

    def rest(self, path: str | None = None) -> RestDefinition:
        return self.definitions.rest(path)

    def configure(self) -> None:
        raise NotImplementedError

    def build(self) -> RestsDefinition:
        if not self._configured:
            self.configure()
            self._configured = True
        return self.definitions
