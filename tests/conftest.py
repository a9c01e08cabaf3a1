import pytest

from minivim import logger
from minivim.buffer import Buffer
from minivim.cursor import Cursor
from minivim.state import EditorState, Mode
from minivim.ui import input as key_input
from minivim.viewport import Viewport


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path, monkeypatch):
    monkeypatch.setattr(logger, "LOG_FILE_PATH", str(tmp_path / "minivim.log"))


def make_state(lines=None, row=0, col=0, mode=Mode.NORMAL, visible_rows=10,
               filename="test.txt", read_only=False):
    buf = Buffer(filename, lines, read_only=read_only)
    return EditorState(
        buffer=buf,
        viewport=Viewport(visible_rows),
        cursor=Cursor(row, col),
        mode=mode,
    )


def feed(state, keys):
    """Dispatch each key in turn; plain strings are split into characters."""
    for key in keys:
        key_input.dispatch(state, key)
    return state


class FakeTerminal:
    def __init__(self, keys, size=(24, 80)):
        self.keys = list(keys)
        self.height, self.width = size
        self.frames = []

    def size(self):
        return self.height, self.width

    def read_key(self):
        if not self.keys:
            raise AssertionError("session asked for more keys than were scripted")
        return self.keys.pop(0)

    def draw(self, frame):
        self.frames.append(frame)
