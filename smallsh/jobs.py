import os
import logging

import psutil

from smallsh.config import MAX_BG
from smallsh.status import decode

log = logging.getLogger(__name__)

EMPTY = 0


class JobTable:
    """
    Fixed-capacity table of background pids.

    Slots are written at a wrapping cursor, never searched for a free one:
    once `capacity` jobs have been registered the next one overwrites slot 0
    whether or not that job was reaped.
    """

    def __init__(self, capacity=MAX_BG):
        if capacity < 1:
            raise ValueError("job table capacity must be at least 1")
        self.capacity = capacity
        self.slots = [EMPTY] * capacity
        self.cursor = 0

    def register(self, pid):
        """Store pid at the cursor and advance it."""
        old = self.slots[self.cursor]
        if old != EMPTY:
            log.warning("job slot %d overwritten: pid %d is no longer tracked", self.cursor, old)
        self.slots[self.cursor] = pid
        log.debug("registered pid %d in slot %d", pid, self.cursor)
        self.cursor += 1
        if self.cursor >= self.capacity:
            self.cursor = 0

    def pids(self):
        return [pid for pid in self.slots if pid != EMPTY]

    def __len__(self):
        return len(self.pids())

    def reap_all(self):
        """
        Non-blocking collection of every finished job.
        Returns: list of (pid, Exited | Signaled), slot order
        """
        finished = []
        for i, pid in enumerate(self.slots):
            if pid == EMPTY:
                continue
            try:
                done_pid, raw = os.waitpid(pid, os.WNOHANG)
            except ChildProcessError:
                # Already collected elsewhere or not our child any more
                print(f"Wait failed for background pid {pid}", flush=True)
                self.slots[i] = EMPTY
                continue
            if done_pid == 0:
                continue
            outcome = decode(raw)
            log.debug("reaped pid %d: %s", pid, outcome)
            finished.append((pid, outcome))
            self.slots[i] = EMPTY
        return finished

    def show(self):
        """Print occupied slots with their live state."""
        pids = self.pids()
        if not pids:
            print("No background jobs.")
            return

        print(f"{'PID':<8} {'Status'}")
        print("-" * 40)
        for pid in pids:
            try:
                status = psutil.Process(pid).status()
            except psutil.NoSuchProcess:
                status = "terminated"
            except psutil.AccessDenied:
                status = "unknown"
            print(f"{pid:<8} [{status}]")

    def terminate_all(self):
        """Send SIGTERM to every tracked job still alive (used on exit)."""
        for pid in self.pids():
            try:
                psutil.Process(pid).terminate()
                print(f"Terminated background job [{pid}]")
            except psutil.NoSuchProcess:
                pass
            except psutil.AccessDenied as e:
                print(f"Could not terminate job {pid}: {e}")
