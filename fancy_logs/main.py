"""
Command line entry point.

    fancy-logs                      print a demo line for every action
    fancy-logs <action> <words...>  print one line, e.g. `fancy-logs success Deployed`
    fancy-logs --version            print the installed version

Configuration comes from FANCY_LOGS_* environment variables, a .env file or
~/.fancy_logs/config.json (see config.py).
"""

import sys

from rich.markup import escape

from .config import load_logger_config
from .console import console, err_console
from .exceptions import UnknownActionError
from .logger import Logger
from .utils import get_version, print_header


def run_demo(logger: Logger) -> None:
    """Print one sample line per action, then show pause/resume filtering."""
    for name in logger.actions.names():
        logger.log(name, "Sample %s message", name)

    logger.pause_logger()
    logger.info("Queued while paused")
    logger.skip("Dropped by the resume filter")
    logger.complete({"message": "Replayed after resume", "suffix": "(deferred)"})
    logger.resume_logger(lambda record: record.action != "skip")


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    if args and args[0] in ("-V", "--version"):
        console.print(get_version())
        return 0

    config = load_logger_config()
    logger = Logger(config)

    if not args:
        print_header(config)
        run_demo(logger)
        return 0

    name, *words = args
    try:
        logger.log(name, " ".join(words))
    except UnknownActionError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 2
    return 0
