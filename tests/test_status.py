"""Tests for decoding raw wait statuses."""

import os
import signal

from smallsh.status import Exited, Signaled, decode
from helpers import spawn


def _raw_status(pid: int) -> int:
    _, raw = os.waitpid(pid, 0)
    return raw


class TestDecode:
    """decode() yields Exited or Signaled, nothing else."""

    def test_normal_exit_zero(self) -> None:
        """A child returning 0 decodes to Exited(0)."""
        assert decode(_raw_status(spawn(0))) == Exited(0)

    def test_normal_exit_code_preserved(self) -> None:
        """The declared exit value is carried through."""
        expected = 42
        assert decode(_raw_status(spawn(expected))) == Exited(expected)

    def test_killed_by_signal(self) -> None:
        """A child killed by SIGTERM decodes to Signaled(SIGTERM)."""
        pid = spawn(0, sleep=30)
        os.kill(pid, signal.SIGTERM)
        assert decode(_raw_status(pid)) == Signaled(signal.SIGTERM)

    def test_killed_by_sigkill(self) -> None:
        """SIGKILL is reported with its own number."""
        pid = spawn(0, sleep=30)
        os.kill(pid, signal.SIGKILL)
        outcome = decode(_raw_status(pid))
        assert isinstance(outcome, Signaled)
        assert outcome.signal_number == signal.SIGKILL


class TestOutcomeText:
    """Outcomes print the way the shell reports them."""

    def test_exited_str(self) -> None:
        assert str(Exited(3)) == "exit value 3"

    def test_signaled_str(self) -> None:
        assert str(Signaled(2)) == "terminated by signal 2"
