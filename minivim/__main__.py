"""
Main entry point and session loop for the minivim editor.
"""
import argparse
import curses
import os
import sys

from minivim import __version__, logger
from minivim.buffer import Buffer
from minivim.config import load_config
from minivim.state import WRAP_MODES, EditorState
from minivim.ui import input as key_input
from minivim.ui import screen
from minivim.viewport import Viewport

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minivim",
        description="A minimal modal text editor for the terminal.",
    )
    parser.add_argument("filename", help="file to edit (created on first write if missing)")
    parser.add_argument("-t", "--truncate", action="store_true",
                        help="start from an empty buffer, ignoring existing content")
    parser.add_argument("-R", "--read-only", action="store_true",
                        help="refuse to modify or write the file")
    parser.add_argument("-W", "--wrap", choices=WRAP_MODES, default=None,
                        help="how long lines are shown (default: scroll)")
    parser.add_argument("--config", metavar="PATH", default=None,
                        help="configuration file to read instead of ~/minivim/config/minivim.conf")
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv=None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def run_session(terminal, state: EditorState) -> int:
    """
    Read, dispatch and redraw until a quit command sets the exit flag.
    Returns the exit code.
    """
    height, width = terminal.size()
    if height < screen.MIN_ROWS:
        raise screen.TerminalTooSmall(height)
    state.viewport.resize(screen.text_rows(height), state.cursor.row)
    terminal.draw(screen.compose(state, height, width))

    while not state.exit_flag:
        key = terminal.read_key()
        key_input.dispatch(state, key)
        if state.exit_flag:
            break
        height, width = terminal.size()
        state.viewport.resize(screen.text_rows(height), state.cursor.row)
        terminal.draw(screen.compose(state, height, width))
    return state.exit_code


def main(stdscr, state: EditorState) -> int:
    return run_session(screen.CursesTerminal(stdscr), state)


def run(argv=None) -> int:
    """Parse the command line, load the file and run the editor."""
    args = parse_args(argv)
    config = load_config(args.config)
    if config.log_file:
        logger.set_log_file(config.log_file)

    try:
        buf = Buffer.from_file(args.filename, truncate=args.truncate, read_only=args.read_only)
    except OSError as e:
        print(f"minivim: cannot open {args.filename}: {e.strerror or e}", file=sys.stderr)
        return 1

    state = EditorState(
        buffer=buf,
        viewport=Viewport(1),
        wrap_mode=args.wrap or config.wrap,
        banner=config.banner,
    )
    try:
        return curses.wrapper(main, state)
    except screen.TerminalTooSmall as e:
        logger.log(str(e))
        print(f"minivim: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(run())
