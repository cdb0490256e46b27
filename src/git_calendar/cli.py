from __future__ import annotations

import argparse
import datetime as dt
import sys
from pathlib import Path

from .aggregate import tally_contributions
from .calendar_window import CalendarWindow
from .config import load_config, resolve_email
from .errors import CalendarError
from .git import get_repo_toplevel, iter_commits
from .render import render_calendar


def _parse_date(value: str) -> dt.date:
    try:
        return dt.date.fromisoformat(value.strip())
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date {value!r} (expected YYYY-MM-DD)")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="git-calendar", description="Visualize the past year of git history.")
    parser.add_argument(
        "-e",
        "--email",
        type=str,
        default=None,
        help="Author's email address, or \"*\" for all commits. Defaults to git's user.email.",
    )
    parser.add_argument("--repo", type=Path, default=Path("."), help="Path inside the git repository to read.")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional JSON config file; its \"email\" key replaces user.email as the default.",
    )
    parser.add_argument("--today", type=_parse_date, default=None, help="Last day of the calendar (default: today).")
    return parser


def run(args: argparse.Namespace) -> str:
    repo = get_repo_toplevel(args.repo)
    config = load_config(args.config) if args.config is not None else {}
    email = resolve_email(args.email, config, repo)

    window = CalendarWindow.from_today(args.today)
    commits = iter_commits(repo)
    try:
        grid = tally_contributions(window, email, commits)
    finally:
        commits.close()
    return render_calendar(window, grid)


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        out = run(args)
    except (CalendarError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
