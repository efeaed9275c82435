import os
import signal
from enum import Enum


class Role(Enum):
    FOREGROUND = "fg"
    BACKGROUND = "bg"


# Dispositions a child installs before exec, per role
CHILD_DISPOSITIONS = {
    Role.FOREGROUND: {
        signal.SIGINT: signal.SIG_DFL,
        signal.SIGTSTP: signal.SIG_IGN,
        signal.SIGCHLD: signal.SIG_IGN,
    },
    Role.BACKGROUND: {
        signal.SIGINT: signal.SIG_IGN,
        signal.SIGTSTP: signal.SIG_IGN,
        signal.SIGCHLD: signal.SIG_IGN,
    },
}


def apply_child_policy(role):
    """Install the signal dispositions for a freshly forked child."""
    for signum, disposition in CHILD_DISPOSITIONS[role].items():
        signal.signal(signum, disposition)


class ForegroundOnlyMode:
    """
    Process-wide "foreground-only" flag toggled by SIGTSTP.

    The handler only flips the flag and writes a fixed, pre-encoded notice
    with os.write(); no buffered I/O or formatting happens in it.
    """

    ENTER_NOTICE = b"\nEntering foreground-only mode (& is now ignored)\n"
    EXIT_NOTICE = b"\nExiting foreground-only mode\n"

    def __init__(self, fd=1):
        self.fd = fd
        self.enabled = False

    def handle_sigtstp(self, signum, frame):
        notice = self.EXIT_NOTICE if self.enabled else self.ENTER_NOTICE
        self.enabled = not self.enabled
        try:
            os.write(self.fd, notice)
        except OSError:
            pass

    def install(self):
        """Shell-side policy: ignore SIGINT, toggle the mode on SIGTSTP."""
        signal.signal(signal.SIGINT, signal.SIG_IGN)
        signal.signal(signal.SIGTSTP, self.handle_sigtstp)
