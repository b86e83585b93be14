"""CLI entrypoints for gtkdoc2ctk commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, GeneratorConfig, load_config
from .errors import FormatError, GeneratorError
from .formatter import format_file
from .logging import configure_logging, get_logger
from .orchestrator import Generator


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
        prog="gtkdoc2ctk",
        description="Generate CTK Go source from GTK2 gtk-doc HTML reference pages.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write debug logging to this file.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a .gtkdoc2ctk.yml file or its directory (defaults to the current directory).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate Go source for one documentation page.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    selector = generate_parser.add_mutually_exclusive_group()
    selector.add_argument(
        "--page",
        help="Type page name (e.g. GtkButton) or full documentation URL to download.",
    )
    selector.add_argument(
        "--path",
        type=Path,
        help="Local gtk-doc HTML file to parse.",
    )
    generate_parser.add_argument(
        "--package-name",
        default=None,
        help="Go package name for the generated source (defaults to ctk).",
    )
    destination = generate_parser.add_mutually_exclusive_group()
    destination.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the generated source to this file.",
    )
    destination.add_argument(
        "--output-path",
        type=Path,
        default=None,
        help="Write the generated source into this directory as <snake_name>.go.",
    )
    generate_parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite existing output files.",
    )
    generate_parser.add_argument(
        "-D",
        "--include-deprecated",
        action="store_true",
        help="Include deprecated properties, signals and functions.",
    )

    fmt_parser = subparsers.add_parser(
        "fmt",
        help="Rewrite the interface of CTK Go source files to match their exported methods.",
    )
    _add_verbose_option(fmt_parser, suppress_default=True)
    fmt_parser.add_argument(
        "files",
        nargs="+",
        type=Path,
        help="Go source files to reformat.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for gtkdoc2ctk commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "generate":
        try:
            config = load_config(args.config or Path.cwd())
        except ConfigError as exc:
            parser.exit(1, f"{exc}\n")
        _run_generate(parser, args, config)
    elif args.command == "fmt":
        _run_fmt(parser, args.files)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_generate(
    parser: argparse.ArgumentParser, args: argparse.Namespace, config: GeneratorConfig
) -> None:
    if not args.page and args.path is None:
        parser.exit(1, "missing --page or --path arguments\n")

    output_path = args.output_path
    if output_path is None and args.output is None:
        output_path = config.output_path
    if output_path is not None and not output_path.is_dir():
        parser.exit(1, f"--output-path does not exist or is not a directory: {output_path}\n")

    generator = Generator(
        package_name=args.package_name or config.package_name,
        include_deprecated=bool(args.include_deprecated or config.include_deprecated),
        doc_url=config.doc_url,
        request_timeout=config.request_timeout,
        extractors=config.extractors or None,
    )
    try:
        generator.run(
            page=args.page,
            path=args.path,
            output=args.output,
            output_path=output_path,
            force=bool(args.force or config.force),
        )
    except GeneratorError as exc:
        parser.exit(1, f"gtkdoc2ctk generate failed: {exc}\nRun with --verbose for more details.\n")


def _run_fmt(parser: argparse.ArgumentParser, files: list[Path]) -> None:
    logger = get_logger("cli")
    failures = 0
    for path in files:
        try:
            outcome = format_file(path)
        except FormatError as exc:
            failures += 1
            logger.error("%s", exc)
            print(f"error processing file: {path} - {exc}")
            continue
        print(f"{outcome}: {path}")
    if failures:
        parser.exit(1, f"gtkdoc2ctk fmt failed for {failures} of {len(files)} file(s)\n")


if __name__ == "__main__":
    main(sys.argv[1:])
