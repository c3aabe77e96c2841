"""Command-line interface for compiling and rendering svg libraries."""

import argparse
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from .config import CompileConfig, load_compile_config
from .errors import FileError, NotFoundError, StorageError
from .library import compile_libraries
from .render import render
from .storage import load_library, save_library


def parse_attr(value: str) -> tuple[str, str]:
    """Parse a ``NAME=VALUE`` attribute argument."""
    name, sep, attr = value.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {value!r}")
    return name, attr


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="inline_svg",
        description="Compile folders of svg files into an inline svg library and render from it",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- compile subcommand ---
    compile_parser = subparsers.add_parser(
        "compile",
        help="Compile svg folders into a library file",
    )
    compile_parser.add_argument(
        "roots",
        type=Path,
        nargs="*",
        help="Svg folders, compiled in order (later folders overwrite earlier keys)",
    )
    compile_parser.add_argument(
        "-c", "--config",
        type=Path,
        help="YAML config with roots/output/format/variable",
    )
    compile_parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Library file to write (.yaml, .yml or .py). Lists keys if omitted",
    )
    compile_parser.add_argument(
        "--format",
        choices=["yaml", "python"],
        help="Library file format (default: from output suffix)",
    )
    compile_parser.add_argument(
        "--variable",
        default=None,
        help="Dict name in a generated python module (default: SVGS)",
    )

    # --- render subcommand ---
    render_parser = subparsers.add_parser(
        "render",
        help="Render one svg from a library file",
    )
    render_parser.add_argument(
        "library",
        type=Path,
        help="Library file written by compile",
    )
    render_parser.add_argument("key", help="Svg key, e.g. heroicons/user")
    render_parser.add_argument(
        "-a", "--attr",
        type=parse_attr,
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Attribute to insert into the svg tag (repeatable)",
    )

    # --- list subcommand ---
    list_parser = subparsers.add_parser(
        "list",
        help="List the keys in a library file",
    )
    list_parser.add_argument(
        "library",
        type=Path,
        help="Library file written by compile",
    )

    return parser


def _compile_config(args: argparse.Namespace) -> CompileConfig:
    """Merge a config file (if any) with command-line overrides."""
    if args.config:
        config = load_compile_config(args.config)
    else:
        config = CompileConfig(roots=args.roots or [Path(".")])

    updates = {}
    if args.config and args.roots:
        updates["roots"] = args.roots
    if args.output is not None:
        updates["output"] = args.output
    if args.format is not None:
        updates["format"] = args.format
    if args.variable is not None:
        updates["variable"] = args.variable
    if updates:
        config = CompileConfig(**{**config.model_dump(), **updates})
    return config


def cmd_compile(args: argparse.Namespace) -> int:
    """Execute compile subcommand."""
    if args.config and not args.config.exists():
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1

    try:
        config = _compile_config(args)
    except (ValidationError, ValueError, yaml.YAMLError) as exc:
        print(f"Error: Invalid compile config: {exc}", file=sys.stderr)
        return 1

    for root in config.roots:
        if not root.is_dir():
            print(f"Error: Svg folder not found: {root}", file=sys.stderr)
            return 1

    try:
        library = compile_libraries(config.roots)
    except FileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if config.output is None:
        for key in sorted(library):
            print(key)
        return 0

    try:
        save_library(library, config.output, config.get_format(), config.variable)
    except StorageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Compiled {len(library)} svgs into {config.output}")
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    """Execute render subcommand."""
    try:
        library = load_library(args.library)
        svg = render(library, args.key, args.attr)
    except (StorageError, NotFoundError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(svg)
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """Execute list subcommand."""
    try:
        library = load_library(args.library)
    except StorageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for key in sorted(library):
        print(key)
    return 0


COMMANDS = {
    "compile": cmd_compile,
    "render": cmd_render,
    "list": cmd_list,
}


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    command = COMMANDS.get(args.command)
    if command is None:
        parser.print_help()
        return 1
    return command(args)


if __name__ == "__main__":
    sys.exit(main())
