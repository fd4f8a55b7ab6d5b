"""Command-line interface for ColumnSmith."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import uvicorn

from .config import settings
from .matching import classify_columns
from .tabular import TableLoadError
from .workspace import TableEditor, Workspace

DELIMITER_NAMES = {",": "comma", ";": "semicolon", "\t": "tab", "|": "pipe"}


def main():
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="ColumnSmith - reshape delimited files and match them against a reference"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Server command
    server_parser = subparsers.add_parser("serve", help="Start the web server")
    server_parser.add_argument(
        "--host", default=settings.host, help=f"Host to bind to (default: {settings.host})"
    )
    server_parser.add_argument(
        "--port", type=int, default=settings.port, help=f"Port to bind to (default: {settings.port})"
    )
    server_parser.add_argument(
        "--reload", action="store_true", help="Enable auto-reload for development"
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Show the detected delimiter, headers and row count of a file"
    )
    inspect_parser.add_argument("file", type=Path)

    convert_parser = subparsers.add_parser(
        "convert", help="Re-export a file as sanitized, comma-delimited CSV"
    )
    convert_parser.add_argument("file", type=Path)
    convert_parser.add_argument(
        "--output", "-o", type=Path, help="Write to this path instead of stdout"
    )

    match_parser = subparsers.add_parser(
        "match", help="Compare the columns of a file against a reference file"
    )
    match_parser.add_argument("file", type=Path)
    match_parser.add_argument("reference", type=Path)

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        run_server(args.host, args.port, args.reload)
    elif args.command == "inspect":
        sys.exit(run_inspect(args.file))
    elif args.command == "convert":
        sys.exit(run_convert(args.file, args.output))
    elif args.command == "match":
        sys.exit(run_match(args.file, args.reference))
    else:
        parser.print_help()
        sys.exit(1)


def run_server(host: str, port: int, reload: bool):
    """Run the web server."""
    uvicorn.run(
        "columnsmith.api:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )


def _load(editor: TableEditor, path: Path) -> bool:
    try:
        asyncio.run(editor.load_path(path))
    except TableLoadError as e:
        print(f"Error loading {path}: {e}", file=sys.stderr)
        return False
    return True


def run_inspect(path: Path) -> int:
    editor = TableEditor(1)
    if not _load(editor, path):
        return 1

    table = editor.model.table
    print(f"File:      {path}")
    print(f"Delimiter: {DELIMITER_NAMES.get(editor.delimiter, repr(editor.delimiter))}")
    print(f"Columns:   {len(table.headers)}")
    print(f"Rows:      {table.row_count}")
    for index, header in enumerate(table.headers):
        print(f"  [{index}] {header}")
    return 0


def run_convert(path: Path, output: Optional[Path] = None) -> int:
    editor = TableEditor(1)
    if not _load(editor, path):
        return 1

    result = editor.export()
    if output:
        output.write_text(result.content, encoding="utf-8")
        print(f"Wrote {output}")
    else:
        sys.stdout.write(result.content)
        if not result.content.endswith("\n"):
            sys.stdout.write("\n")
    return 0


def run_match(path: Path, reference_path: Path) -> int:
    workspace = Workspace()
    if not _load(workspace.working, path) or not _load(workspace.reference, reference_path):
        return 1

    result = workspace.match()
    print(f"Status:   {result.classification.value}")
    print(f"Progress: {result.progress_percent:.1f}%")
    print(result.message)

    for match in classify_columns(
        workspace.working.model.column_names(), workspace.reference_names()
    ):
        print(f"  [{match.index}] {match.status.value:<8} {match.name}")
    return 0


if __name__ == "__main__":
    main()
