import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Exited:
    """Child returned normally with an exit code."""
    code: int

    def __str__(self):
        return f"exit value {self.code}"


@dataclass(frozen=True)
class Signaled:
    """Child was terminated by a signal."""
    signal_number: int

    def __str__(self):
        return f"terminated by signal {self.signal_number}"


def decode(raw_status):
    """
    Classify a raw waitpid() status.
    Returns: Exited or Signaled
    """
    if os.WIFSIGNALED(raw_status):
        return Signaled(os.WTERMSIG(raw_status))
    # Stopped/continued children are never reported: waits are issued
    # without WUNTRACED/WCONTINUED, so anything else is a normal exit.
    return Exited(os.WEXITSTATUS(raw_status))
