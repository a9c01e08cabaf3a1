"""
Editor state for the minivim editor.

EditorState holds everything one editing session mutates: the buffer, the
cursor, the viewport, the active mode and the transient command-line and
warning text. The session loop owns a single instance and passes it to the
mode handlers.
"""
import enum
from dataclasses import dataclass, field

from minivim import cursor as motion
from minivim import logger
from minivim.buffer import Buffer
from minivim.cursor import Cursor
from minivim.viewport import Viewport

WRAP_MODES = ("break", "scroll")
DEFAULT_BANNER = "minivim -- :w write  :q quit"


class Mode(enum.Enum):
    NORMAL = "normal"
    INSERT = "insert"
    COMMAND = "command"


@dataclass
class EditorState:
    buffer: Buffer
    viewport: Viewport = field(default_factory=lambda: Viewport(1))
    cursor: Cursor = field(default_factory=Cursor)
    mode: Mode = Mode.NORMAL
    command_buffer: str = ""
    pending_key: str = ""
    warning: str = ""
    wrap_mode: str = "scroll"
    banner: str = DEFAULT_BANNER
    exit_flag: bool = False
    exit_code: int = 0

    def set_mode(self, mode: Mode) -> None:
        """Switch modes, resetting the per-mode transient state."""
        if mode is self.mode:
            return
        logger.log(f"mode: {self.mode.value} -> {mode.value}")
        self.mode = mode
        self.pending_key = ""
        self.command_buffer = ""
        self.clamp_cursor()

    def clamp_cursor(self) -> None:
        motion.clamp(self.buffer, self.cursor, append=self.mode is Mode.INSERT)

    def reconcile(self) -> None:
        """Restore the cursor and viewport invariants after an edit."""
        self.buffer.ensure_not_empty()
        self.clamp_cursor()
        self.viewport.scroll_to(self.cursor.row)

    def graceful_exit(self, code: int = 0) -> None:
        logger.log("Editor exited.")
        self.exit_code = code
        self.exit_flag = True
