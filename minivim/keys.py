"""
Key vocabulary for the minivim editor.

A key is either a single printable character (a one-character string) or one
of the named keys below. The terminal surface translates raw terminal input
into this vocabulary so the editing core never sees backend key codes.
"""

UP = "<Up>"
DOWN = "<Down>"
LEFT = "<Left>"
RIGHT = "<Right>"
HOME = "<Home>"
END = "<End>"
ENTER = "<Enter>"
ESCAPE = "<Esc>"
BACKSPACE = "<BS>"
DELETE = "<Del>"
TAB = "<Tab>"
RESIZE = "<Resize>"

NAMED_KEYS = (UP, DOWN, LEFT, RIGHT, HOME, END, ENTER, ESCAPE,
              BACKSPACE, DELETE, TAB, RESIZE)

NAVIGATION_KEYS = (UP, DOWN, LEFT, RIGHT, HOME, END)


def is_printable(key: str) -> bool:
    """True for a single character that may be inserted into the buffer."""
    return len(key) == 1 and key.isprintable()
