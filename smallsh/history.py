import os
import sys
import logging
import readline

from smallsh.config import HISTORY_FILE, MAX_HISTORY

log = logging.getLogger(__name__)


def init_readline():
    """Line editing for interactive sessions; skipped when stdin is not a tty."""
    if not sys.stdin.isatty():
        log.debug("stdin is not a tty, readline bindings skipped")
        return

    readline.parse_and_bind("set editing-mode emacs")
    readline.parse_and_bind("\\e[A: previous-history")
    readline.parse_and_bind("\\e[B: next-history")
    readline.parse_and_bind("\\e[1;5D: backward-word")
    readline.parse_and_bind("\\e[1;5C: forward-word")


def load_history(path=HISTORY_FILE):
    try:
        if os.path.exists(path):
            readline.read_history_file(path)
        readline.set_history_length(MAX_HISTORY)
    except OSError as e:
        print(f"Warning: Could not load history: {e}", file=sys.stderr)


def save_history(path=HISTORY_FILE):
    try:
        readline.set_history_length(MAX_HISTORY)
        readline.write_history_file(path)
    except OSError as e:
        print(f"Warning: Could not save history: {e}", file=sys.stderr)
