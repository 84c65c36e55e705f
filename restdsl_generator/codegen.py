"""Materialize route rules as a definition graph or as generated source.

The definition builder and the routes.py.j2 template issue the same
fluent calls, so executing generated source yields the graph that
build_definition returns for the same rules.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Iterable, Protocol

import jinja2

from .filer import SourceFiler
from .loader import ApiInfo
from .model import RestDefinition, RestsDefinition
from .route_builder import RouteRule

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "routes.py.j2"
MEDIA_TYPE_SEPARATOR = ","


class TextSink(Protocol):
    def write(self, text: str, /) -> Any: ...


def _doc_text(value: Any) -> str:
    """Make a value safe to embed in a triple-quoted docstring."""
    text = re.sub(r"\s+", " ", str(value)).strip()
    return text.replace("\\", "\\\\").replace('"', '\\"')


def _environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["py"] = repr
    env.filters["doc"] = _doc_text
    return env


def apply_rule(rest: RestDefinition, rule: RouteRule) -> None:
    """Add one rule to a rest definition as a verb."""
    rest.verb(rule.method, rule.path)
    if rule.operation_id:
        rest.id(rule.operation_id)
    if rule.description:
        rest.description(rule.description)
    if rule.consumes:
        rest.consumes(MEDIA_TYPE_SEPARATOR.join(rule.consumes))
    if rule.produces:
        rest.produces(MEDIA_TYPE_SEPARATOR.join(rule.produces))
    for param in rule.params:
        rest.param(param.name, param.kind, param.required, param.data_type, param.description)
    rest.to(rule.destination)


def build_definition(info: ApiInfo, rules: Iterable[RouteRule]) -> RestsDefinition:
    """Build the in-memory definition graph. No I/O."""
    definitions = RestsDefinition()
    rest = definitions.rest(info.base_path)
    for rule in rules:
        apply_rule(rest, rule)
    return definitions


def render_source(
    info: ApiInfo,
    rules: Iterable[RouteRule],
    class_name: str,
    package_name: str,
    timestamp: str | None = None,
) -> str:
    """Render the route module source text."""
    template = _environment().get_template(TEMPLATE_NAME)
    return template.render(
        title=info.title or class_name,
        version=info.version,
        base_path=info.base_path,
        class_name=class_name,
        package_name=package_name,
        timestamp=timestamp,
        rules=list(rules),
    )


def write_source(sink: TextSink, text: str) -> None:
    """Write rendered source to a caller-owned sink. The sink is flushed but not closed."""
    sink.write(text)
    flush = getattr(sink, "flush", None)
    if callable(flush):
        flush()


def qualified_name(package_name: str, class_name: str) -> str:
    return f"{package_name}.{class_name}" if package_name else class_name


def source_path(directory: Path, package_name: str, class_name: str) -> Path:
    """Resolve directory/<package parts>/<ClassName>.py."""
    parts = package_name.split(".") if package_name else []
    return Path(directory).joinpath(*parts, f"{class_name}.py")


def write_to_path(directory: Path, package_name: str, class_name: str, text: str) -> Path:
    """Write rendered source below directory, replacing any existing file.

    A failure while writing can leave a partially written file behind.
    """
    output_path = source_path(directory, package_name, class_name)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8", newline="\n") as f:
        f.write(text)
    logger.info("wrote %s", output_path)
    return output_path


def write_to_filer(filer: SourceFiler, package_name: str, class_name: str, text: str) -> str:
    """Write rendered source through a source filer keyed by qualified class name."""
    name = qualified_name(package_name, class_name)
    with filer.create_source_file(name) as out:
        out.write(text)
    logger.info("generated source %s", name)
    return name
