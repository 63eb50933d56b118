# src/griddata/cli.py
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from .builder import GridBuilder
from .context import GridContext
from .exceptions import GridDataError
from .search import SearchTextVisitor
from .utils.config_manager import config_manager
from .utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)

cli_help_text = """
  griddata search <file>...      Prints the searchable text of each grid.
  griddata validate <file>...    Prints whether each grid (and each row) holds valid content.
  griddata controls <file>...    Lists the controls of each grid, optionally filtered by --alias.
""".strip()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="griddata",
        description="Inspect page builder grid JSON.",
        epilog=cli_help_text,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", default=None, help="Overrides debug.level from settings.json.")
    parser.add_argument("--normalize", action="store_true", help="Collapse whitespace in searchable text.")
    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="Print the searchable text of each grid.")
    search.add_argument("files", nargs="+", type=Path)

    validate = sub.add_parser("validate", help="Report the validity of each grid and its rows.")
    validate.add_argument("files", nargs="+", type=Path)

    controls = sub.add_parser("controls", help="List the controls of each grid.")
    controls.add_argument("files", nargs="+", type=Path)
    controls.add_argument("--alias", help="Only list controls using this editor alias.")
    return parser


def _print_search(model, visitor: SearchTextVisitor) -> None:
    for line in visitor.visit(model):
        tqdm.write(line)


def _print_validate(model) -> None:
    tqdm.write(f"grid '{model.name}': {'valid' if model.is_valid else 'invalid'}")
    for row in model.rows:
        label = row.label if row.has_label else row.name
        tqdm.write(f"  row {row.id} ({label}): {'valid' if row.is_valid else 'invalid'}")


def _print_controls(model, alias: Optional[str]) -> None:
    for control in model.get_all_controls(alias=alias):
        tqdm.write(f"{control.editor.alias}\t{type(control.value).__name__}\t{'valid' if control.is_valid else 'invalid'}")


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point of the `griddata` console script. Returns the exit code."""
    parsed = _build_parser().parse_args(argv)

    configure_logger(
        parsed.log_level or config_manager.get_nested("debug.level", "WARNING"),
        module_specific_levels=config_manager.get_nested("debug.module_levels", {}),
        silenced_loggers=config_manager.get_nested("debug.silenced_loggers", {}),
    )

    context = GridContext.from_config()
    if parsed.normalize:
        context = context.with_features(normalize_whitespace=True)

    builder = GridBuilder(context)
    visitor = SearchTextVisitor(context)
    exit_code = 0

    files = parsed.files
    for path in tqdm(files, desc="Grids", unit="file", disable=len(files) < 2):
        try:
            model = builder.parse_file(path)
        except (OSError, GridDataError) as e:
            logger.error("Failed to parse %s: %s", path, e)
            exit_code = 1
            continue

        if len(files) > 1:
            tqdm.write(f"# {path}")

        if parsed.command == "search":
            _print_search(model, visitor)
        elif parsed.command == "validate":
            _print_validate(model)
        elif parsed.command == "controls":
            _print_controls(model, parsed.alias)

    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
