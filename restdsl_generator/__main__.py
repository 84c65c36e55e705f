"""Entry point: python -m restdsl_generator SPEC

Reads an OpenAPI/Swagger document (JSON or YAML) and writes the generated
route module to stdout, or below --output-dir.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .errors import GeneratorError
from .generator import DEFAULT_PACKAGE_NAME, RestDslGenerator
from .loader import load_spec


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="restdsl_generator",
        description="Generate REST DSL routes from an OpenAPI/Swagger document.",
    )
    parser.add_argument("spec", type=Path, help="path to the OpenAPI/Swagger document")
    parser.add_argument("-o", "--output-dir", type=Path, help="directory to write the module into")
    parser.add_argument("--package", default=DEFAULT_PACKAGE_NAME, help="package of the generated module")
    parser.add_argument("--class-name", help="class name (default: derived from info.title)")
    parser.add_argument("--timestamps", action="store_true", help="add a generation timestamp")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        generator = RestDslGenerator(load_spec(args.spec)).with_package_name(args.package)
        if args.class_name:
            generator.with_class_name(args.class_name)
        if args.timestamps:
            generator.with_source_code_timestamps()

        if args.output_dir is None:
            generator.to_appendable(sys.stdout)
            return 0
        output_path = generator.to_path(args.output_dir)
    except (GeneratorError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Generated {output_path} ({len(generator.last_rules)} routes)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
