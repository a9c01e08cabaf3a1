"""
Input handling for the minivim editor.

Processes one key for the active mode (normal, insert, command) and updates
the editor state accordingly. Keys arrive already translated into the
vocabulary of minivim.keys, so nothing here depends on the terminal backend.
"""
from minivim import commands, keys, logger
from minivim import cursor as motion
from minivim.buffer import ReadOnlyError
from minivim.state import Mode

NORMAL_MOTIONS = {
    keys.UP: motion.move_up,
    keys.DOWN: motion.move_down,
    keys.LEFT: motion.move_left,
    keys.RIGHT: motion.move_right,
    keys.HOME: motion.line_start,
    keys.END: motion.line_end,
    "0": motion.line_start,
    "$": motion.line_end,
}

INSERT_MOTIONS = {key: NORMAL_MOTIONS[key] for key in keys.NAVIGATION_KEYS}


def handle_normal_mode(state, key: str):
    """Handle a key press in normal mode."""
    buf = state.buffer
    cur = state.cursor

    # A pending 'd' swallows whatever comes next
    if state.pending_key:
        pending, state.pending_key = state.pending_key, ""
        if pending == "d" and key == "d":
            delete_current_line(state)
        return

    if key in NORMAL_MOTIONS:
        NORMAL_MOTIONS[key](buf, cur)
        return

    if key == "w":
        motion.word_forward(buf, cur)
        return
    if key == "b":
        motion.word_backward(buf, cur)
        return

    if key == "d":
        state.pending_key = "d"
        return

    if key == "i":
        state.set_mode(Mode.INSERT)
        return

    if key == ":":
        state.set_mode(Mode.COMMAND)
        return


def delete_current_line(state):
    """The `dd` chord: drop the cursor line and land on its first non-space."""
    buf = state.buffer
    cur = state.cursor
    deleted = cur.row
    try:
        buf.delete_line(deleted)
    except ReadOnlyError:
        state.warning = commands.READ_ONLY_WARNING
        return
    if cur.row >= len(buf):
        cur.row = len(buf) - 1
    cur.col = motion.first_non_space(buf, cur.row)
    logger.log(f"dd: deleted line {deleted + 1}")


def handle_insert_mode(state, key: str):
    """Handle a key press in insert mode."""
    buf = state.buffer
    cur = state.cursor

    if key == keys.ESCAPE:
        state.set_mode(Mode.NORMAL)
        return

    if key in INSERT_MOTIONS:
        INSERT_MOTIONS[key](buf, cur, append=True)
        return

    if key in (keys.TAB, keys.RESIZE):
        return

    try:
        if key == keys.ENTER:
            buf.split_line(cur.row, cur.col)
            cur.row += 1
            cur.col = 0
        elif key == keys.BACKSPACE:
            if cur.col > 0:
                buf.delete_char(cur.row, cur.col - 1)
                cur.col -= 1
            elif cur.row > 0:
                cur.col = buf.join_with_next(cur.row - 1)
                cur.row -= 1
        elif key == keys.DELETE:
            if cur.col < len(buf.line(cur.row)):
                buf.delete_char(cur.row, cur.col)
            elif cur.row < len(buf) - 1:
                buf.join_with_next(cur.row)
        elif keys.is_printable(key):
            buf.insert_char(cur.row, cur.col, key)
            cur.col += 1
    except ReadOnlyError:
        state.warning = commands.READ_ONLY_WARNING


def handle_command_mode(state, key: str):
    """Handle a key press in command (:) mode."""
    if key == keys.ESCAPE:
        state.set_mode(Mode.NORMAL)
        return
    if key == keys.ENTER:
        cmd = state.command_buffer
        state.set_mode(Mode.NORMAL)
        commands.process_command(state, cmd)
        return

    # Basic text input in command mode
    if key == keys.BACKSPACE:
        state.command_buffer = state.command_buffer[:-1]
    elif keys.is_printable(key):
        state.command_buffer += key


HANDLERS = {
    Mode.NORMAL: handle_normal_mode,
    Mode.INSERT: handle_insert_mode,
    Mode.COMMAND: handle_command_mode,
}


def dispatch(state, key: str):
    """Route one key to the active mode's handler and reconcile the view."""
    state.warning = ""
    HANDLERS[state.mode](state, key)
    state.reconcile()
