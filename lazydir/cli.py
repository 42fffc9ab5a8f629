"""Command-line front door for lazydir.

Parses CLI options, resolves and validates the starting directory, and sets
up logging. Then dispatches into the interactive browser runtime.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import config
from .errors import InvalidStartupPathError, LazydirError
from .runtime import run_browser
from .runtime.loop import RuntimeLoopTiming
from .ui_theme import available_theme_names

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def resolve_start_path(raw_path: str | None, default_path: Path | None = None) -> Path:
    """Return the directory to browse first.

    ``raw_path`` wins over ``default_path``; with neither, the current working
    directory is used. Raises ``InvalidStartupPathError`` for missing paths and
    non-directories.
    """
    if raw_path is not None:
        path = Path(raw_path).expanduser()
    elif default_path is not None:
        path = default_path
    else:
        path = Path.cwd()
    if not path.exists():
        raise InvalidStartupPathError(path, "Path not found")
    if not path.is_dir():
        raise InvalidStartupPathError(path, "Not a directory")
    return path.resolve()


def configure_logging(log_file: Path | None, verbose: bool) -> None:
    """Attach a file handler when a log file is requested.

    Without one, only the package ``NullHandler`` is present and records are
    dropped, keeping the alternate screen clean.
    """
    if log_file is None:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8", errors="backslashreplace")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("lazydir")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch lazydir on a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Startup failures exit with status 1 and a message.
    """
    parser = argparse.ArgumentParser(description="Browse directories in the terminal.")
    parser.add_argument("path", nargs="?", default=None, help="Directory to open. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--print", dest="print_only", action="store_true", help="Print the listing and exit.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write log records to this file.")
    parser.add_argument("--verbose", action="store_true", help="Log debug records (with --log-file).")
    args = parser.parse_args()

    log_file = args.log_file or config.load_log_file()
    try:
        configure_logging(log_file, args.verbose)
    except OSError as exc:
        raise SystemExit(f"cannot open log file {log_file}: {exc.strerror or exc}") from exc

    try:
        path = resolve_start_path(args.path, default_path)
        logger.info("starting in %s", path)
        run_browser(
            path,
            theme_name=args.theme or config.load_theme_name(),
            no_color=args.no_color,
            print_only=args.print_only,
            timing=RuntimeLoopTiming(poll_timeout_ms=config.load_poll_timeout_ms()),
        )
    except LazydirError as exc:
        logger.error("startup failed: %s", exc)
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
