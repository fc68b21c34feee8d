"""Command-line interface for classpath-closure."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import orjson

from graph.loader import load_graph
from graph.models import GraphError
from messages.sink import StreamSink, report_exception_error
from resolve.classpath import ClasspathResult, resolve_classpath
from settings.config import ConfigError, load_config, resolve_graph_path

BUILDER_NAME = "closure"

_WANTS = {
    "libraries": (True, False),
    "outputs": (False, True),
    "resolve": (True, True),
}


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("module", help="Name of the starting module")
    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Project root holding closure.toml (default: .)",
    )
    parser.add_argument(
        "--graph",
        default=None,
        help="Graph snapshot file (default: config graph file)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="closure")
    subparsers = parser.add_subparsers(dest="command", required=True)

    libraries_parser = subparsers.add_parser(
        "libraries", help="List library files on the module's classpath"
    )
    _add_common_args(libraries_parser)

    outputs_parser = subparsers.add_parser(
        "outputs", help="List output directories of dependent modules"
    )
    _add_common_args(outputs_parser)

    resolve_parser = subparsers.add_parser(
        "resolve", help="List both library files and output directories"
    )
    _add_common_args(resolve_parser)

    return parser


def _write_result(command: str, result: ClasspathResult, *, as_json: bool) -> None:
    payload = result.as_strings()
    if command == "libraries":
        payload = {"libraries": payload["libraries"]}
    elif command == "outputs":
        payload = {"output_dirs": payload["output_dirs"]}

    if as_json:
        opts = orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2
        sys.stdout.write(orjson.dumps(payload, option=opts).decode() + "\n")
        return

    if len(payload) == 1:
        for path in next(iter(payload.values())):
            sys.stdout.write(f"{path}\n")
        return

    for label, paths in payload.items():
        sys.stdout.write(f"{label}:\n")
        for path in paths:
            sys.stdout.write(f"  {path}\n")


def _handle_resolve(args: argparse.Namespace) -> int:
    root = Path(args.root).expanduser().resolve()
    sink = StreamSink(sys.stderr)
    want_libraries, want_output_dirs = _WANTS[args.command]

    try:
        config = load_config(root)
        graph_path = (
            Path(args.graph).expanduser().resolve()
            if args.graph is not None
            else resolve_graph_path(root, config)
        )
        graph = load_graph(graph_path)
        result = resolve_classpath(
            graph,
            args.module,
            want_libraries=want_libraries,
            want_output_dirs=want_output_dirs,
            config=config,
        )
    except (ConfigError, GraphError) as exc:
        report_exception_error(sink, None, exc, BUILDER_NAME)
        return 2

    _write_result(args.command, result, as_json=args.json)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.command in _WANTS:
        return _handle_resolve(args)

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())
