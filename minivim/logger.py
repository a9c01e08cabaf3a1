"""
Logger module for the minivim editor.

Provides a simple file-based logger for debugging and error tracking. The log
file lives outside the edited file's directory so it never shows up in the
user's working tree.
"""
import datetime
import os

# Define the log file path
LOG_FILE_PATH = os.path.expanduser("~/minivim/minivim.log")


def set_log_file(path: str) -> None:
    """Redirect subsequent log lines to `path`."""
    global LOG_FILE_PATH
    LOG_FILE_PATH = os.path.expanduser(path)


def log(message: str) -> None:
    """Append a timestamped message to the log file."""
    try:
        directory = os.path.dirname(LOG_FILE_PATH)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(LOG_FILE_PATH, 'a', encoding='utf-8') as f:
            timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            f.write(f"[{timestamp}] {message}\n")
    except OSError:
        # If logging fails (e.g., file not writable), ignore to avoid crashing the editor.
        pass
