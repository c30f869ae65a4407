#!/usr/bin/env python3
# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point for validating data files against registered schemas."""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List

from ..api import SchemaValidator
from ..config import validator_config
from ..exceptions import DocumentLoadError, SchemaLoadError, ValidationError
from ..parsers.document_parser import DocumentParser
from ..parsers.schema_loader import load_schema_directory, load_schema_file
from ..registry.schema_registry import SchemaRegistry
from .report import ValidationReport, format_error_line

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_UNKNOWN_SCHEMA = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='data-schema-validate',
        description='Validate YAML/JSON data files against declarative schemas',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'paths',
        nargs='+',
        help='Data files to validate',
    )
    parser.add_argument(
        '--schema',
        required=True,
        help='Id of the schema the data files must satisfy',
    )
    parser.add_argument(
        '--schema-dir',
        action='append',
        default=[],
        help='Directory holding <id>.schema.(yaml|yml|json) files (repeatable)',
    )
    parser.add_argument(
        '--schema-file',
        action='append',
        default=[],
        help='Single schema file to register (repeatable)',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--no-strict',
        action='store_true',
        help='Skip the shape check of schema files',
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help='Log level for diagnostics (default: from environment, INFO)',
    )
    return parser


def load_schemas(validator: SchemaValidator, args: argparse.Namespace, parser: DocumentParser) -> None:
    """Register the schemas named on the command line.

    Raises:
        SchemaLoadError: If any schema file fails to load; files in a
            directory are all attempted before the first failure is raised
    """
    strict = not args.no_strict
    failures: List[SchemaLoadError] = []
    for schema_dir in args.schema_dir:
        count = load_schema_directory(
            validator.registry, schema_dir, strict=strict, parser=parser, errors=failures
        )
        logger.debug(f"Registered {count} schema(s) from '{schema_dir}'")
    for schema_file in args.schema_file:
        load_schema_file(validator.registry, schema_file, strict=strict, parser=parser)
    if failures:
        raise failures[0]


def validate_files(
    validator: SchemaValidator, schema_id: str, paths: List[str], parser: DocumentParser
) -> List[ValidationReport]:
    """Validate each data file and collect one report per file."""
    reports = []
    for path_str in paths:
        report = ValidationReport(Path(path_str))
        try:
            data = parser.load_document(path_str)
            validator.validate(schema_id, data)
        except DocumentLoadError as exc:
            report.add_error(str(exc))
        except ValidationError as exc:
            report.add_violations(exc.violations)
        reports.append(report)
    return reports


def print_reports(reports: List[ValidationReport], output_format: str) -> None:
    if output_format == 'json':
        output = {
            'files': len(reports),
            'errors': sum(len(r.errors) for r in reports),
            'results': [r.to_dict() for r in reports],
        }
        print(json.dumps(output, indent=2, default=repr))
    elif output_format == 'github-actions':
        for report in reports:
            for error in report.errors:
                print(f"::error file={report.file_path}::{format_error_line(error)}")
    else:  # human-readable
        for report in reports:
            if report.ok:
                continue
            print(f"\n{report.file_path}:")
            for error in report.errors:
                print(f"  ERROR: {format_error_line(error)}")


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the validation CLI."""
    args = build_parser().parse_args(argv)

    config = validator_config
    if args.log_level:
        config = replace(config, log_level=args.log_level)
    config.set_logging()

    validator = SchemaValidator(SchemaRegistry(), config)
    parser = DocumentParser(cache_enabled=config.cache_enabled)

    try:
        load_schemas(validator, args, parser)
    except SchemaLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(EXIT_INVALID)

    if not validator.has(args.schema):
        available = ", ".join(sorted(validator.registry.ids())) or "none"
        print(f"Error: schema '{args.schema}' is not registered (available: {available})", file=sys.stderr)
        sys.exit(EXIT_UNKNOWN_SCHEMA)

    reports = validate_files(validator, args.schema, args.paths, parser)
    print_reports(reports, args.format)

    if any(not r.ok for r in reports):
        sys.exit(EXIT_INVALID)
    if args.format == 'human':
        print(f"Validated {len(reports)} file(s) with no errors.")
    sys.exit(EXIT_OK)


if __name__ == '__main__':
    main()
