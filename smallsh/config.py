import os

# Input limits
MAX_LINE = 2048
MAX_ARGS = 512

# Background job table capacity
MAX_BG = 20

# Seconds the shell pauses after spawning a background job
BG_SPAWN_DELAY = float(os.getenv("SMALLSH_BG_DELAY", "1.0"))

PROMPT = ":"
BG_MARKER = "&"
PID_MARKER = "$$"
COMMENT_CHAR = "#"
NULL_DEVICE = os.devnull

HISTORY_FILE = os.getenv("SMALLSH_HISTFILE") or os.path.expanduser("~/.smallsh_history")
MAX_HISTORY = 1000

LOG_LEVEL = os.getenv("SMALLSH_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
