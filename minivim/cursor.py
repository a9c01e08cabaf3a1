"""
Cursor motions for the minivim editor.

Every motion takes the buffer and the cursor and moves the cursor in place.
`append` selects the Insert-mode column bound, where the cursor may sit one
past the last character of the line.
"""
from dataclasses import dataclass


@dataclass
class Cursor:
    row: int = 0
    col: int = 0


def max_col(buf, row: int, append: bool = False) -> int:
    """Largest column the cursor may occupy on `row`."""
    if append:
        return len(buf.line(row))
    return buf.last_col(row)


def clamp(buf, cursor: Cursor, append: bool = False) -> None:
    """Force the cursor back inside the document."""
    cursor.row = min(max(cursor.row, 0), len(buf) - 1)
    cursor.col = min(max(cursor.col, 0), max_col(buf, cursor.row, append))


def move_up(buf, cursor: Cursor, append: bool = False) -> None:
    if cursor.row > 0:
        cursor.row -= 1
        cursor.col = min(cursor.col, max_col(buf, cursor.row, append))


def move_down(buf, cursor: Cursor, append: bool = False) -> None:
    if cursor.row < len(buf) - 1:
        cursor.row += 1
        cursor.col = min(cursor.col, max_col(buf, cursor.row, append))


def move_left(buf, cursor: Cursor, append: bool = False) -> None:
    """One column left, wrapping to the end of the previous line."""
    if cursor.col > 0:
        cursor.col -= 1
    elif cursor.row > 0:
        cursor.row -= 1
        cursor.col = max_col(buf, cursor.row, append)


def move_right(buf, cursor: Cursor, append: bool = False) -> None:
    """One column right, wrapping to the start of the next line."""
    if cursor.col < max_col(buf, cursor.row, append):
        cursor.col += 1
    elif cursor.row < len(buf) - 1:
        cursor.row += 1
        cursor.col = 0


def line_start(buf, cursor: Cursor, append: bool = False) -> None:
    cursor.col = 0


def line_end(buf, cursor: Cursor, append: bool = False) -> None:
    cursor.col = max_col(buf, cursor.row, append)


def word_forward(buf, cursor: Cursor) -> None:
    """
    Step forward over spaces.

    Moves at least one column, continuing while the character under the
    cursor is a space. Landing on the last column of the line wraps to the
    start of the next line, if there is one. Only the space character counts
    as a separator.
    """
    line = buf.line(cursor.row)
    last = buf.last_col(cursor.row)
    while cursor.col < last:
        cursor.col += 1
        if line[cursor.col] != " ":
            break
    if cursor.col >= last and cursor.row < len(buf) - 1:
        cursor.row += 1
        cursor.col = 0


def word_backward(buf, cursor: Cursor) -> None:
    """
    Step backward over spaces.

    Mirror image of word_forward: reaching column 0 wraps to the last column
    of the previous line, if there is one.
    """
    line = buf.line(cursor.row)
    while cursor.col > 0:
        cursor.col -= 1
        if line[cursor.col] != " ":
            break
    if cursor.col == 0 and cursor.row > 0:
        cursor.row -= 1
        cursor.col = buf.last_col(cursor.row)


def first_non_space(buf, row: int) -> int:
    """Column of the first non-space character on `row`, clamped to the line."""
    line = buf.line(row)
    stripped = len(line) - len(line.lstrip(" "))
    return min(stripped, buf.last_col(row))
