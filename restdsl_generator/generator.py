"""REST DSL generator bound to one API specification.

    generator = RestDslGenerator(spec).with_package_name("petstore.routes")
    generator.to_path(Path("build/generated"))

Options are set with the with_* methods before generating; each returns
the generator. Every instance owns its own direct-route counter.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from . import codegen
from .codegen import TextSink
from .errors import ConfigurationError
from .filer import SourceFiler
from .loader import ApiInfo, get_info, require_spec
from .model import RestsDefinition
from .naming import (
    ClassNameTransform,
    DestinationGenerator,
    DirectRouteNamer,
    default_class_name,
    is_valid_class_name,
    is_valid_package_name,
)
from .route_builder import RouteRule, translate

DEFAULT_PACKAGE_NAME = "rest_dsl_generated"


class RestDslGenerator:
    def __init__(self, spec: Any) -> None:
        self.spec = require_spec(spec)
        self._destination_generator: DestinationGenerator = DirectRouteNamer()
        self._class_name_transform: ClassNameTransform = default_class_name
        self._package_name = DEFAULT_PACKAGE_NAME
        self._timestamps = False
        self.last_rules: tuple[RouteRule, ...] = ()

    def with_destination_generator(self, destination_generator: DestinationGenerator) -> RestDslGenerator:
        if not callable(destination_generator):
            raise ConfigurationError("destination generator must be callable")
        self._destination_generator = destination_generator
        return self

    def with_class_name_transform(self, transform: ClassNameTransform) -> RestDslGenerator:
        if not callable(transform):
            raise ConfigurationError("class name transform must be callable")
        self._class_name_transform = transform
        return self

    def with_class_name(self, class_name: str) -> RestDslGenerator:
        if not isinstance(class_name, str) or not is_valid_class_name(class_name):
            raise ConfigurationError(f"invalid class name: {class_name!r}")
        return self.with_class_name_transform(lambda _title: class_name)

    def with_package_name(self, package_name: str) -> RestDslGenerator:
        if not isinstance(package_name, str) or not is_valid_package_name(package_name):
            raise ConfigurationError(f"invalid package name: {package_name!r}")
        self._package_name = package_name
        return self

    def with_source_code_timestamps(self, enabled: bool = True) -> RestDslGenerator:
        self._timestamps = enabled
        return self

    @property
    def info(self) -> ApiInfo:
        return get_info(self.spec)

    @property
    def package_name(self) -> str:
        return self._package_name

    def class_name(self) -> str:
        name = self._class_name_transform(self.info.title)
        if not isinstance(name, str) or not is_valid_class_name(name):
            raise ConfigurationError(f"class name transform produced {name!r}")
        return name

    def rules(self) -> tuple[RouteRule, ...]:
        self.last_rules = translate(self.spec, self._destination_generator)
        return self.last_rules

    def _render(self) -> tuple[str, str]:
        rules = self.rules()
        class_name = self.class_name()
        timestamp = None
        if self._timestamps:
            timestamp = datetime.now(timezone.utc).isoformat(timespec="seconds")
        text = codegen.render_source(
            self.info, rules, class_name, self._package_name, timestamp=timestamp
        )
        return class_name, text

    def to_definition(self) -> RestsDefinition:
        return codegen.build_definition(self.info, self.rules())

    def to_appendable(self, sink: TextSink) -> TextSink:
        _, text = self._render()
        codegen.write_source(sink, text)
        return sink

    def to_source(self) -> str:
        return self._render()[1]

    def to_path(self, directory: Path) -> Path:
        class_name, text = self._render()
        return codegen.write_to_path(Path(directory), self._package_name, class_name, text)

    def to_filer(self, filer: SourceFiler) -> str:
        class_name, text = self._render()
        return codegen.write_to_filer(filer, self._package_name, class_name, text)
