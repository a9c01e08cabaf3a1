"""
minivim/ui/screen.py

Turns the editor state into a Frame (text rows, status line, command line and
cursor position) and puts frames on a curses terminal. Composition is pure;
only CursesTerminal talks to curses.
"""
import curses
from dataclasses import dataclass, field

from wcwidth import wcswidth, wcwidth

from minivim import keys, logger
from minivim.state import Mode

# Two rows are reserved for the status and command lines
RESERVED_ROWS = 2
MIN_ROWS = 4


class TerminalTooSmall(Exception):
    """The terminal has too few rows to show any text."""
    def __init__(self, rows: int):
        super().__init__(f"Window is too small to display the content ({rows} rows, need {MIN_ROWS})")
        self.rows = rows


@dataclass
class Frame:
    rows: list = field(default_factory=list)
    status: str = ""
    command: str = ""
    cursor: tuple = (0, 0)


def text_rows(height: int) -> int:
    """Number of document lines that fit in a terminal `height` rows tall."""
    return max(1, height - RESERVED_ROWS)


###############################################################################
# DISPLAY WIDTH HELPERS
###############################################################################

TAB_WIDTH = 8


def char_width(ch: str) -> int:
    return max(0, wcwidth(ch))


def display_width(text: str) -> int:
    """Columns `text` occupies on screen; unprintable characters count as 0."""
    width = wcswidth(text)
    if width >= 0:
        return width
    return sum(char_width(ch) for ch in text)


def expand_tabs(text: str) -> str:
    """Replace each tab with spaces up to the next tab stop, in display columns."""
    if "\t" not in text:
        return text
    out = []
    col = 0
    for ch in text:
        if ch == "\t":
            pad = TAB_WIDTH - col % TAB_WIDTH
            out.append(" " * pad)
            col += pad
        else:
            out.append(ch)
            col += char_width(ch)
    return "".join(out)


def clip(text: str, offset: int, width: int) -> str:
    """The part of `text` visible between display columns offset and offset+width."""
    out = []
    col = 0
    for ch in text:
        w = char_width(ch)
        if col >= offset and col + w <= offset + width:
            out.append(ch)
        col += w
        if col >= offset + width:
            break
    return "".join(out)


def chunk_starts(text: str, width: int) -> list:
    """Character indices where each soft-wrapped row of `text` begins."""
    starts = [0]
    col = 0
    for i, ch in enumerate(text):
        w = char_width(ch)
        if col + w > width and col > 0:
            starts.append(i)
            col = 0
        col += w
    return starts


###############################################################################
# LAYOUT
###############################################################################

def layout_scroll(lines, start_line, cursor_row, cursor_col, height, width):
    """
    One screen row per line. All lines share a horizontal offset that keeps
    the cursor column in view.
    """
    cursor_x = display_width(expand_tabs(lines[cursor_row][:cursor_col]))
    offset = max(0, cursor_x - width + 1)
    visible = lines[start_line:start_line + height]
    rows = [clip(expand_tabs(line), offset, width) for line in visible]
    return rows, (cursor_row - start_line, cursor_x - offset)


def layout_break(lines, start_line, cursor_row, cursor_col, height, width):
    """
    Long lines continue on the following screen rows. Drawing begins at
    start_line unless the wrapped rows above the cursor would push it off
    screen, in which case leading lines are skipped. A cursor line taller
    than the text area is shown from the rows ending at the cursor.
    """
    def row_count(index):
        return len(chunk_starts(expand_tabs(lines[index]), width))

    top = start_line
    while top < cursor_row and sum(row_count(i) for i in range(top, cursor_row + 1)) > height:
        top += 1

    rows = []
    cursor_y = cursor_x = 0
    index = top
    while index < len(lines) and len(rows) < height:
        line = expand_tabs(lines[index])
        starts = chunk_starts(line, width)
        if index == cursor_row:
            # position of the cursor within the tab-expanded line
            col = len(expand_tabs(lines[index][:cursor_col]))
            chunk = max(i for i, s in enumerate(starts) if s <= col)
            cursor_y = len(rows) + chunk
            cursor_x = min(display_width(line[starts[chunk]:col]), width - 1)
        for i, start in enumerate(starts):
            end = starts[i + 1] if i + 1 < len(starts) else len(line)
            rows.append(line[start:end])
        index += 1

    if cursor_y >= height:
        skip = cursor_y - height + 1
        rows = rows[skip:]
        cursor_y -= skip
    return rows[:height], (cursor_y, cursor_x)


LAYOUTS = {
    "scroll": layout_scroll,
    "break": layout_break,
}


###############################################################################
# FRAME COMPOSITION
###############################################################################

def status_line(state) -> str:
    if state.warning:
        return f"[WARN] {state.warning}"
    buf = state.buffer
    flags = ""
    if buf.is_new_file:
        flags += " [new file]"
    if buf.modified:
        flags += " [+]"
    if buf.read_only:
        flags += " [RO]"
    return f"\"{buf.filename}\"{flags}    Line {state.cursor.row + 1}, Col {state.cursor.col + 1}"


def command_line(state) -> str:
    if state.mode is Mode.COMMAND:
        return ":" + state.command_buffer
    if state.mode is Mode.INSERT:
        return "--INSERT--"
    return state.banner


def compose(state, height: int, width: int) -> Frame:
    """Build the frame for a terminal of `height` x `width` cells."""
    layout = LAYOUTS.get(state.wrap_mode, layout_scroll)
    rows, (y, x) = layout(state.buffer.lines, state.viewport.start_line,
                          state.cursor.row, state.cursor.col,
                          text_rows(height), max(1, width))
    frame = Frame(
        rows=rows,
        status=clip(status_line(state), 0, width),
        command=clip(command_line(state), 0, width),
        cursor=(y, x),
    )
    if state.mode is Mode.COMMAND:
        frame.cursor = (height - 1, min(display_width(frame.command), width - 1))
    return frame


###############################################################################
# CURSES TERMINAL
###############################################################################

CURSES_KEYS = {
    curses.KEY_UP: keys.UP,
    curses.KEY_DOWN: keys.DOWN,
    curses.KEY_LEFT: keys.LEFT,
    curses.KEY_RIGHT: keys.RIGHT,
    curses.KEY_HOME: keys.HOME,
    curses.KEY_END: keys.END,
    curses.KEY_ENTER: keys.ENTER,
    curses.KEY_BACKSPACE: keys.BACKSPACE,
    curses.KEY_DC: keys.DELETE,
    curses.KEY_BTAB: keys.TAB,
    curses.KEY_RESIZE: keys.RESIZE,
}

CONTROL_KEYS = {
    "\n": keys.ENTER,
    "\r": keys.ENTER,
    "\x1b": keys.ESCAPE,
    "\x7f": keys.BACKSPACE,
    "\x08": keys.BACKSPACE,
    "\t": keys.TAB,
}


def translate_key(raw):
    """Map a get_wch() result to the key vocabulary, or None if unknown."""
    if isinstance(raw, int):
        return CURSES_KEYS.get(raw)
    if raw in CONTROL_KEYS:
        return CONTROL_KEYS[raw]
    if keys.is_printable(raw):
        return raw
    return None


def safe_addstr(window, y: int, x: int, text: str, attr: int = 0) -> None:
    """
    Safely add a string to the curses window at the given position.
    Logs any curses.error exceptions that occur (e.g., writing off-screen).
    """
    try:
        window.addstr(y, x, text, attr)
    except curses.error:
        logger.log(f"curses.error in addstr at ({y},{x}): '{text}'")


class CursesTerminal:
    """Terminal surface backed by a curses screen."""
    def __init__(self, stdscr):
        self.stdscr = stdscr
        curses.raw()
        curses.noecho()
        self.stdscr.keypad(True)
        try:
            curses.curs_set(1)
        except curses.error:
            pass

    def size(self):
        return self.stdscr.getmaxyx()

    def read_key(self) -> str:
        """Block until a key the editor understands arrives."""
        while True:
            try:
                raw = self.stdscr.get_wch()
            except curses.error:
                continue
            key = translate_key(raw)
            if key is not None:
                return key

    def draw(self, frame: Frame) -> None:
        height, width = self.size()
        self.stdscr.erase()
        for y, row in enumerate(frame.rows):
            safe_addstr(self.stdscr, y, 0, row)
        if height >= RESERVED_ROWS:
            safe_addstr(self.stdscr, height - 2, 0, frame.status, curses.A_REVERSE)
            # The bottom-right cell cannot be written without scrolling
            safe_addstr(self.stdscr, height - 1, 0, clip(frame.command, 0, width - 1))
        try:
            self.stdscr.move(*frame.cursor)
        except curses.error:
            pass
        self.stdscr.refresh()
