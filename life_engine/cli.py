"""CLI entrypoint: advance a JSON board file and print the resulting board.

Board files hold either ``{"cells": [[0, 1, ...], ...]}`` or a bare row
matrix, with rows as the outer index and ``1`` marking live cells.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from life_engine.config.types import GameSettings, load_settings
from life_engine.domain.errors import NotStabilized
from life_engine.domain.grid import Grid
from life_engine.io.paths import generation_log_path
from life_engine.service import check_board_size, check_generation_limit
from life_engine.simulation.engine import search_final_state
from life_engine.simulation.step import step
from life_engine.simulation.trace import trace_generations, write_generation_log

logger = logging.getLogger(__name__)

EXIT_NOT_STABILIZED = 3
"""Process status when the final-state search exhausts its budget."""


def _read_board(path: Path) -> Grid:
    """Load a board JSON file into a ``Grid``."""
    payload = json.loads(Path(path).read_text())
    if isinstance(payload, dict):
        if "cells" not in payload:
            raise ValueError("board file object must contain a 'cells' key")
        payload = payload["cells"]
    return Grid.from_cells(payload)


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {raw!r}") from exc
    if value < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return value


def _positive_int(raw: str) -> int:
    value = _non_negative_int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return value


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("board", type=Path, help="board JSON file")
    common.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="JSON settings file with an optional GameSettings section",
    )
    common.add_argument("--out", type=Path, default=None, help="write result JSON here")
    common.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

    parser = argparse.ArgumentParser(description="Advance Game of Life boards")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("next", parents=[common], help="advance one generation")

    advance_parser = subparsers.add_parser(
        "advance", parents=[common], help="advance N generations"
    )
    advance_parser.add_argument("-n", "--generations", type=_non_negative_int, required=True)
    advance_parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="write per-generation statistics to LOG_DIR/logs/generation_log.parquet",
    )

    final_parser = subparsers.add_parser(
        "final", parents=[common], help="advance until the board stabilizes"
    )
    final_parser.add_argument(
        "--max-steps",
        type=_positive_int,
        default=None,
        help="step budget (defaults to the settings value)",
    )
    return parser


def _run_next(args: argparse.Namespace, grid: Grid, settings: GameSettings) -> dict[str, object]:
    return {"cells": step(grid).to_cells(), "generation": 1}


def _run_advance(
    args: argparse.Namespace, grid: Grid, settings: GameSettings
) -> dict[str, object]:
    check_generation_limit(args.generations, settings)
    final, rows = trace_generations(grid, args.generations)
    if args.log_dir is not None:
        log_path = write_generation_log(rows, generation_log_path(args.log_dir))
        logger.info("Wrote generation log to %s", log_path)
    return {"cells": final.to_cells(), "generation": args.generations}


def _run_final(args: argparse.Namespace, grid: Grid, settings: GameSettings) -> dict[str, object]:
    max_steps = args.max_steps or settings.max_generations_to_final_state
    result = search_final_state(grid, max_steps=max_steps)
    return {
        "cells": result.grid.to_cells(),
        "generation": result.generation,
        "kind": result.kind.value,
        "period": result.period,
    }


_HANDLERS = {
    "next": _run_next,
    "advance": _run_advance,
    "final": _run_final,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = GameSettings()
    if args.settings is not None:
        try:
            settings = load_settings(args.settings)
        except FileNotFoundError:
            parser.error(f"Settings file not found: {args.settings}")
        except OSError as exc:
            parser.error(f"Settings file could not be read: {args.settings}: {exc}")
        except ValueError as exc:
            parser.error(f"Settings file is invalid: {args.settings}: {exc}")

    try:
        grid = _read_board(args.board)
    except FileNotFoundError:
        parser.error(f"Board file not found: {args.board}")
    except OSError as exc:
        parser.error(f"Board file could not be read: {args.board}: {exc}")
    except ValueError as exc:
        parser.error(f"Board file is invalid: {args.board}: {exc}")

    try:
        check_board_size(grid, settings)
        payload = _HANDLERS[args.command](args, grid, settings)
    except NotStabilized as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_NOT_STABILIZED
    except ValueError as exc:
        parser.error(str(exc))

    text = json.dumps(payload, ensure_ascii=False)
    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        args.out.write_text(text + "\n")
    else:
        print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
