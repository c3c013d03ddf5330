"""Command-line entry point: read a board, solve it, print it, exit with the failure code on error."""

# solve_cli.py
# - Reads a board (one row per line, space-separated, 0 or any non-number = blank)
#   from --input or stdin
# - Solves it by backtracking
# - Prints the solved board (text) or a payload (json)
# Exit codes: 0 solved, 10 invalid board, 11 cannot solve board, 2 usage/config error.
#
# Usage:
#   python apps/cli/solve_cli.py < puzzle.txt
#   python apps/cli/solve_cli.py --input puzzle.txt --format json --verbose

import argparse
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backtrack.board_io import format_board, read_board  # noqa: E402
from backtrack.config import ConfigError, load_config  # noqa: E402
from backtrack.errors import InvalidBoard, SudokuError  # noqa: E402
from backtrack.logs import ProgressConfig, ProgressPrinter, log  # noqa: E402
from backtrack.search import SearchStats, solve  # noqa: E402
from backtrack.sudoku_tools import sanity_check  # noqa: E402


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Solve a Sudoku board by exhaustive backtracking.")
    ap.add_argument("--input", type=str, default=None, help="board file (default: stdin)")
    ap.add_argument("--config", type=str, default=None, help="YAML config file")
    ap.add_argument("--format", type=str, default=None, choices=["text", "json"])
    ap.add_argument("--verbose", action="store_true", default=None)
    ap.add_argument("--check", action="store_true", help="report duplicates in the input and exit")
    return ap


def _read(path):
    if path is None:
        return read_board(sys.stdin)
    with open(path, "r", encoding="utf-8") as f:
        return read_board(f)


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    try:
        cfg = load_config(args.config, format=args.format, verbose=args.verbose)
    except (ConfigError, OSError) as e:
        ap.error(str(e))
    quiet = not cfg.verbose

    try:
        board = _read(args.input)
    except SudokuError as e:
        if e.detail:
            log(f"rejected input: {e.detail}", quiet=quiet)
        print(e, file=sys.stderr)
        return e.code
    except (OSError, UnicodeDecodeError) as e:
        ap.error(str(e))
    log(f"read {board.size}x{board.size} board, {board.count_unknown()} unknown cells", quiet=quiet)

    if args.check:
        report = sanity_check(None, board.rows())
        print(json.dumps(report, indent=2))
        return 0 if report["ok"] else InvalidBoard.code

    stats = SearchStats()
    progress = None
    if not quiet:
        progress = ProgressPrinter(ProgressConfig(cfg.progress_every, cfg.progress_secs))
    try:
        solved = solve(board, stats=stats, progress=progress)
    except SudokuError as e:
        log(f"failed: {e.kind} after {stats.nodes:,} nodes in {stats.elapsed:.2f}s", quiet=quiet)
        if e.detail:
            log(f"detail: {e.detail}", quiet=quiet)
        if cfg.format == "json":
            print(json.dumps({"ok": False, "solution": None, "stats": stats.as_dict(), "error": e.as_dict()}, indent=2))
        print(e, file=sys.stderr)
        return e.code

    log(f"solved: {stats.nodes:,} nodes, {stats.backtracks:,} backtracks in {stats.elapsed:.2f}s", quiet=quiet)
    if cfg.format == "json":
        print(json.dumps({"ok": True, "solution": solved.rows(), "stats": stats.as_dict()}, indent=2))
    else:
        sys.stdout.write(format_board(solved))
    return 0


if __name__ == "__main__":
    sys.exit(main())
