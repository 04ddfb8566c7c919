"""Entry point for the pangram checker.

Usage:
    pangram                 # start the interactive checker
    pangram --debug         # same, with debug logging
    pangram -h | --help     # print help
    pangram -v | --version  # print version
"""
import sys
import logging
import argparse

from pangram import __version__
from pangram.errors import PangramError

VERSION = f"pangram {__version__}"
INFO = """
pangram: an interactive pangram checker.

usage: pangram [options]

options:
    -h, --help    Print help information
    -v, --version Print version information
    --debug       Write debug information to the log file

A pangram is a series of words (ideally a sentence) that contains every letter
in the alphabet. The most famous pangram is "The quick brown fox jumps over the
lazy dog", but there are many more.
Run the program without any arguments to start the TUI, where you can type and
check if you have written a pangram. Pressing the 'Escape' key quits the TUI.
Holding the 'Control' key and pressing the letter 'c' also quits the TUI.
"""


def setup_logging(debug: bool = False, log_file=None):
    level = logging.DEBUG if debug else logging.INFO
    kwargs = {}
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        kwargs["filename"] = str(log_file)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
        **kwargs,
    )


def build_parser() -> argparse.ArgumentParser:
    # Unknown arguments fall through to the interactive mode, so help is
    # handled by hand instead of by argparse.
    parser = argparse.ArgumentParser(prog="pangram", add_help=False, allow_abbrev=False)
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("-v", "--version", action="store_true")
    parser.add_argument("--debug", action="store_true")
    return parser


def run_interactive(debug: bool = False) -> int:
    from pangram.app import Controller
    from pangram.config import Config
    from pangram import tui

    config = Config()
    setup_logging(debug or config.debug_logging, config.log_file)
    logger = logging.getLogger(__name__)
    if not config.path.exists():
        # First run: leave an editable copy of the defaults behind.
        config.save()
        logger.info("Wrote default config to %s", config.path)

    controller = Controller()
    try:
        tui.run(controller, config)
    except PangramError as e:
        logger.exception("Internal error, aborting")
        print(f"pangram: internal error: {e}", file=sys.stderr)
        return 1
    return 0


def main(argv=None) -> int:
    # Unrecognised arguments are ignored.
    args, _ = build_parser().parse_known_args(argv)

    if args.help:
        print(INFO)
        return 0
    if args.version:
        print(VERSION)
        return 0
    return run_interactive(debug=args.debug)


if __name__ == "__main__":
    sys.exit(main())
