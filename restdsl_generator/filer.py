"""Build-time source filers.

A filer hands out writable sinks for named generated sources and keeps
track of what it created, so a build can tell fresh output apart from
leftovers of an earlier run.
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import ContextManager, Iterator, Protocol, TextIO

logger = logging.getLogger(__name__)

MANIFEST_NAME = ".restdsl-manifest.json"


class SourceFiler(Protocol):
    def create_source_file(self, qualified_name: str) -> ContextManager[TextIO]: ...


class DirectoryFiler:
    """Writes generated sources below a root directory.

    "pkg.sub.Routes" is written to root/pkg/sub/Routes.py. Creating the
    same source twice in one build raises FileExistsError.
    """

    def __init__(self, root: Path, manifest_name: str = MANIFEST_NAME) -> None:
        self.root = Path(root)
        self.manifest_path = self.root / manifest_name
        self.generated: dict[str, Path] = {}

    def path_for(self, qualified_name: str) -> Path:
        *package, name = qualified_name.split(".")
        return self.root.joinpath(*package, f"{name}.py")

    @contextmanager
    def create_source_file(self, qualified_name: str) -> Iterator[TextIO]:
        if qualified_name in self.generated:
            raise FileExistsError(f"source {qualified_name} already created in this build")
        path = self.path_for(qualified_name)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            self.generated[qualified_name] = path
            yield f

    def _relative(self, path: Path) -> str:
        return path.relative_to(self.root).as_posix()

    def previous_outputs(self) -> list[str]:
        """Files recorded by the last write_manifest(), relative to root."""
        if not self.manifest_path.exists():
            return []
        with open(self.manifest_path, encoding="utf-8") as f:
            return list(json.load(f).get("files", []))

    def stale_files(self) -> list[Path]:
        """Files from the previous build that this build did not regenerate."""
        current = {self._relative(p) for p in self.generated.values()}
        return [self.root / rel for rel in self.previous_outputs() if rel not in current]

    def remove_stale(self) -> list[Path]:
        removed = []
        for path in self.stale_files():
            if path.exists():
                path.unlink()
                logger.info("removed stale source %s", path)
                removed.append(path)
        return removed

    def write_manifest(self) -> Path:
        files = sorted(self._relative(p) for p in self.generated.values())
        self.root.mkdir(parents=True, exist_ok=True)
        with open(self.manifest_path, "w", encoding="utf-8") as f:
            json.dump({"files": files}, f, indent=2)
            f.write("\n")
        return self.manifest_path
