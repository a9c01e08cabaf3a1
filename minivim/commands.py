"""
Command parsing and execution for the minivim editor.

This module evaluates the text typed in command-line (':' mode) against the
fixed save/quit grammar and applies the result to the editor state.
"""
from minivim import logger

UNSAVED_WARNING = "No write since last change (add ! to override)"
READ_ONLY_WARNING = "file is read-only"
NOT_FOUND_WARNING = "Command not found."


def write_buffer(state) -> bool:
    """Save the buffer, setting a warning on failure. Returns True on success."""
    buf = state.buffer
    if buf.read_only:
        state.warning = READ_ONLY_WARNING
        return False
    error = buf.save_to_file()
    if error is not None:
        state.warning = f"failed to save {buf.filename}: {error}"
        return False
    return True


def process_command(state, command: str) -> None:
    """Parse and execute a command-line (':' mode) command string."""
    cmd = command.strip()
    logger.log(f"command: {cmd!r}")

    if cmd == "w":
        write_buffer(state)
        return

    if cmd == "q":
        if state.buffer.modified:
            state.warning = UNSAVED_WARNING
            return
        state.graceful_exit()
        return

    if cmd == "q!":
        state.graceful_exit()
        return

    if cmd == "wq":
        if state.buffer.read_only:
            state.warning = READ_ONLY_WARNING
            return
        if not write_buffer(state):
            logger.log(f"wq: {state.buffer.filename} was NOT written, quitting anyway")
        state.graceful_exit()
        return

    state.warning = NOT_FOUND_WARNING
