import os
import sys
import time
import logging

from smallsh import redirect
from smallsh.config import BG_MARKER, BG_SPAWN_DELAY
from smallsh.errors import FatalEngineError, RedirectionError
from smallsh.signals import Role, apply_child_policy
from smallsh.status import decode

log = logging.getLogger(__name__)


def prepare_child(argv, role):
    """
    Everything the child does between fork() and exec().
    Applies the signal policy for role, binds redirections and returns the
    exec vector. Raises RedirectionError if a target cannot be opened.
    """
    argv = list(argv)
    if role is Role.BACKGROUND and argv and argv[-1] == BG_MARKER:
        argv.pop()

    apply_child_policy(role)

    if role is Role.BACKGROUND:
        print(f"background pid is {os.getpid()}", flush=True)

    redir = redirect.resolve(argv)
    redirect.apply(redir, role)
    return redir.argv


def replace_image(exec_argv):
    """
    Exec the target program. Only returns control by exiting the process.
    """
    if not exec_argv:
        print("no command given", flush=True)
        os._exit(1)
    try:
        os.execvp(exec_argv[0], exec_argv)
    except OSError:
        print(f"{exec_argv[0]}: no such file or directory", flush=True)
    os._exit(1)


def _run_child(argv, role):
    try:
        exec_argv = prepare_child(argv, role)
    except RedirectionError as e:
        print(e, flush=True)
        os._exit(1)
    replace_image(exec_argv)


class Executor:
    """
    Spawns commands and tracks the background ones in a JobTable.
    """

    def __init__(self, jobs, spawn_delay=BG_SPAWN_DELAY):
        self.jobs = jobs
        self.spawn_delay = spawn_delay

    def execute(self, argv, role=Role.FOREGROUND):
        """
        Fork and exec argv.
        Returns: Exited | Signaled for a foreground command, None for background
        Raises FatalEngineError when fork() or the foreground wait fails.
        """
        # Anything still buffered would be written twice after fork()
        sys.stdout.flush()
        sys.stderr.flush()

        try:
            pid = os.fork()
        except OSError as e:
            raise FatalEngineError(f"Error: Child couldn't fork: {e}") from e

        if pid == 0:
            try:
                _run_child(argv, role)
            finally:
                os._exit(1)

        log.debug("spawned pid %d (%s): %s", pid, role.value, argv)
        if role is Role.FOREGROUND:
            return self.wait(pid)

        time.sleep(self.spawn_delay)
        self.jobs.register(pid)
        return None

    def wait(self, pid):
        """Block until pid terminates and decode its status."""
        try:
            _, raw = os.waitpid(pid, 0)
        except ChildProcessError as e:
            raise FatalEngineError(f"Wait failed: {e}") from e
        outcome = decode(raw)
        log.debug("pid %d finished: %s", pid, outcome)
        return outcome
