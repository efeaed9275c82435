"""Shared helpers for tests that fork real children."""

import os
import time


def spawn(exit_code=0, sleep=0.0):
    """Fork a child that optionally sleeps, then exits with exit_code."""
    pid = os.fork()
    if pid == 0:
        try:
            if sleep:
                time.sleep(sleep)
        finally:
            os._exit(exit_code)
    return pid


def reap_until(table, count, timeout=5.0):
    """Poll table.reap_all() until count jobs were collected or timeout."""
    collected = []
    deadline = time.monotonic() + timeout
    while len(collected) < count and time.monotonic() < deadline:
        collected.extend(table.reap_all())
        time.sleep(0.02)
    return collected
