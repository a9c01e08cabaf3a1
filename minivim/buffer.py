"""
Buffer module for the minivim editor.

Defines the Buffer class holding the lines of the file being edited, the
editing primitives the mode handlers build on, and loading/saving to disk.
A buffer always holds at least one line.
"""
import os

from minivim import logger

ENCODING = "utf-8"
ERRORS = "surrogateescape"


class ReadOnlyError(Exception):
    """Raised when a mutation is attempted on a read-only buffer."""


class Buffer:
    """Represents the text of one file with its modification state."""
    def __init__(self, filename: str = None, lines=None, read_only: bool = False):
        self.filename = filename
        self.lines = list(lines) if lines is not None else [""]
        if not self.lines:
            self.lines = [""]
        self.read_only = read_only
        self.modified = False
        self.is_new_file = False

    @classmethod
    def from_file(cls, filename: str, truncate: bool = False, read_only: bool = False):
        """
        Load `filename` into a new buffer.

        A path that does not exist yields a single empty line flagged as a new
        file. With `truncate` the existing content is ignored. Any other
        OSError propagates to the caller.
        """
        buf = cls(filename, read_only=read_only)
        if truncate:
            buf.is_new_file = not os.path.exists(filename)
            logger.log(f"opened {filename} truncated")
            return buf
        try:
            with open(filename, "r", encoding=ENCODING, errors=ERRORS, newline="") as f:
                content = f.read()
        except FileNotFoundError:
            buf.is_new_file = True
            logger.log(f"opened new file {filename}")
            return buf
        buf.lines = split_lines(content)
        logger.log(f"opened {filename} ({len(buf.lines)} lines)")
        return buf

    def __len__(self):
        return len(self.lines)

    def line(self, row: int) -> str:
        return self.lines[row]

    def last_col(self, row: int) -> int:
        """Index of the last character on `row` (0 for an empty line)."""
        return max(0, len(self.lines[row]) - 1)

    def check_writable(self):
        if self.read_only:
            raise ReadOnlyError(self.filename)

    def insert_char(self, row: int, col: int, ch: str):
        self.check_writable()
        line = self.lines[row]
        self.lines[row] = line[:col] + ch + line[col:]
        self.modified = True

    def delete_char(self, row: int, col: int):
        """Remove the character at (row, col)."""
        self.check_writable()
        line = self.lines[row]
        self.lines[row] = line[:col] + line[col + 1:]
        self.modified = True

    def split_line(self, row: int, col: int):
        """Split `row` at `col`, moving the remainder to a new line below."""
        self.check_writable()
        line = self.lines[row]
        self.lines[row] = line[:col]
        self.lines.insert(row + 1, line[col:])
        self.modified = True

    def join_with_next(self, row: int) -> int:
        """
        Append line `row + 1` onto line `row` and remove it.
        Returns the column of the join point.
        """
        self.check_writable()
        join_col = len(self.lines[row])
        self.lines[row] += self.lines.pop(row + 1)
        self.modified = True
        return join_col

    def delete_line(self, row: int):
        """Delete line `row`; deleting the only line leaves one empty line."""
        self.check_writable()
        self.lines.pop(row)
        self.ensure_not_empty()
        self.modified = True

    def ensure_not_empty(self):
        if not self.lines:
            self.lines = [""]

    def byte_count(self) -> int:
        return sum(len(line.encode(ENCODING, ERRORS)) + 1 for line in self.lines)

    def save_to_file(self):
        """
        Write every line followed by a newline to self.filename.
        Returns None on success or the error message on failure.
        """
        try:
            self.check_writable()
            with open(self.filename, "w", encoding=ENCODING, errors=ERRORS, newline="") as f:
                for line in self.lines:
                    f.write(line + "\n")
        except ReadOnlyError:
            return "file is read-only"
        except OSError as e:
            logger.log(f"error saving {self.filename}: {e}")
            return e.strerror or str(e)
        self.modified = False
        self.is_new_file = False
        logger.log(f"wrote {self.filename} ({len(self.lines)} lines, {self.byte_count()} bytes)")
        return None


def split_lines(content: str) -> list:
    """Split file content into lines, treating "\\n" as a terminator."""
    if not content:
        return [""]
    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return lines
