"""
Viewport controller for the minivim editor.

Keeps track of which document line sits at the top of the text area and
scrolls so the cursor row is always on screen.
"""


class Viewport:
    """Visible window of `visible_rows` lines starting at `start_line`."""
    def __init__(self, visible_rows: int, start_line: int = 0):
        self.visible_rows = max(1, visible_rows)
        self.start_line = max(0, start_line)

    def __repr__(self):
        return f"Viewport(start_line={self.start_line}, visible_rows={self.visible_rows})"

    def screen_row(self, cursor_row: int) -> int:
        """Row of the cursor relative to the top of the text area."""
        return cursor_row - self.start_line

    def scroll_to(self, cursor_row: int) -> None:
        """Auto-scroll so `cursor_row` is inside the visible window."""
        row = self.screen_row(cursor_row)
        bottom = self.visible_rows - 1
        if row > bottom:
            self.start_line += row - bottom
        elif row < 0 and self.start_line + row >= 0:
            self.start_line += row

    def resize(self, visible_rows: int, cursor_row: int) -> None:
        """
        Adapt to a new text-area height.

        The top line shifts by the change in height, so a cursor near the
        bottom of the window stays near the bottom. The shift never moves the
        cursor above the window and collapses to the top of the document when
        it would go negative.
        """
        visible_rows = max(1, visible_rows)
        diff = self.visible_rows - visible_rows
        self.visible_rows = visible_rows
        if diff == 0:
            self.scroll_to(cursor_row)
            return
        start = min(self.start_line + diff, cursor_row)
        self.start_line = max(0, start)
        self.scroll_to(cursor_row)
