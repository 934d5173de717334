"""CLI entrypoints for apidocgen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .engine import EngineNotFoundError, load_engine
from .logging import configure_logging
from .task import GenerateOpenApiDocumentTask


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="apidocgen",
        description="Generate OpenAPI documents from C# XML documentation files.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate one OpenAPI document per document variant.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    generate_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Project directory or .apidocgen.yml file (defaults to current directory).",
    )
    generate_parser.add_argument(
        "--document-version",
        help="Version of the produced documents (not the OpenAPI spec version).",
    )
    generate_parser.add_argument(
        "--assembly",
        dest="assembly_paths",
        action="append",
        default=[],
        metavar="PATH",
        help="Assembly used to resolve documented types; repeatable.",
    )
    generate_parser.add_argument(
        "--documentation-file",
        dest="documentation_paths",
        action="append",
        default=[],
        metavar="PATH",
        help="XML documentation file to transform; repeatable.",
    )
    generate_parser.add_argument("--description", help="Override the document description.")
    generate_parser.add_argument("--output-path", help="Directory receiving the documents.")
    generate_parser.add_argument(
        "--intermediate-output-path",
        help="Fallback directory used when --output-path is not given.",
    )
    generate_parser.add_argument(
        "--spec-version",
        help="OpenAPI spec version: 2.0 or 3.0 (default 3.0).",
    )
    generate_parser.add_argument(
        "--prefix",
        dest="output_file_name_prefix",
        help="Prefix for generated file names (default OpenApiDocument).",
    )
    generate_parser.add_argument(
        "--format",
        dest="output_format",
        help="Output format: JSON or YAML (default JSON).",
    )
    generate_parser.add_argument(
        "--engine",
        help="Generation engine plugin name or module:attribute reference.",
    )
    generate_parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write log output to this file.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for apidocgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=getattr(args, "log_file", None))

    if args.command != "generate":  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")

    try:
        config = load_config(Path(args.path))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    parameters = config.to_parameters(
        document_version=args.document_version,
        assembly_paths=args.assembly_paths,
        documentation_paths=args.documentation_paths,
        description=args.description,
        output_path=args.output_path,
        intermediate_output_path=args.intermediate_output_path,
        spec_version=args.spec_version,
        output_file_name_prefix=args.output_file_name_prefix,
        output_format=args.output_format,
    )

    try:
        engine = load_engine(args.engine or config.engine)
    except (EngineNotFoundError, TypeError) as exc:
        parser.exit(1, f"{exc}\n")

    task = GenerateOpenApiDocumentTask(parameters, engine)
    if not task.execute():
        parser.exit(1, "apidocgen generate failed. Run with --verbose for more details.\n")

    for path in task.open_api_documents:
        print(_relativize(path))


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
