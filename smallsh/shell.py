import os
import sys
import logging

from smallsh import config
from smallsh.builtin import execute_builtin
from smallsh.errors import FatalEngineError, InputRetry
from smallsh.executor import Executor
from smallsh.history import init_readline, load_history, save_history
from smallsh.jobs import JobTable
from smallsh.parser import expand_pid, read_line, tokenize
from smallsh.signals import ForegroundOnlyMode, Role
from smallsh.status import Exited, Signaled

log = logging.getLogger(__name__)


class Shell:
    """Prompt loop and dispatcher."""

    def __init__(self, jobs=None, mode=None, executor=None):
        self.jobs = jobs if jobs is not None else JobTable(config.MAX_BG)
        self.mode = mode if mode is not None else ForegroundOnlyMode()
        self.executor = executor if executor is not None else Executor(self.jobs)
        self.last_outcome = Exited(0)

    def report_finished_jobs(self):
        for pid, outcome in self.jobs.reap_all():
            print(f"background pid {pid} is done: {outcome}", flush=True)

    def choose_role(self, args):
        """
        Decide how args runs. A trailing "&" is dropped when foreground-only
        mode is on.
        Returns: (args, Role)
        """
        if args[-1] != config.BG_MARKER:
            return args, Role.FOREGROUND
        if self.mode.enabled:
            return args[:-1], Role.FOREGROUND
        return args, Role.BACKGROUND

    def dispatch(self, args):
        """
        Run one tokenized command line.
        Returns: False when the shell should exit
        """
        if not args or args[0].startswith(config.COMMENT_CHAR):
            return True
        if args == ["exit"]:
            return False
        if execute_builtin(args, self):
            return True

        args, role = self.choose_role(args)
        if not args:
            return True

        log.debug("dispatching %s as %s", args, role.value)
        outcome = self.executor.execute(args, role)
        if outcome is not None:
            self.last_outcome = outcome
            if isinstance(outcome, Signaled):
                print(outcome, flush=True)
        return True

    def run_once(self):
        """One prompt cycle. Returns False when the shell should exit."""
        self.report_finished_jobs()
        try:
            line = read_line(config.PROMPT)
        except EOFError:
            print()
            return False
        except InputRetry as e:
            print(f"\n{e}", flush=True)
            return True

        line = expand_pid(line, os.getpid())
        try:
            args = tokenize(line)
        except InputRetry as e:
            print(e, flush=True)
            return True
        return self.dispatch(args)

    def run(self):
        while self.run_once():
            pass

    def shutdown(self):
        self.jobs.terminate_all()
        print("Terminating...", flush=True)


def configure_logging(level=None):
    logging.basicConfig(
        level=level or config.LOG_LEVEL,
        format=config.LOG_FORMAT,
        stream=sys.stderr,
    )


def main():
    configure_logging()

    shell = Shell()
    shell.mode.install()
    init_readline()
    load_history()

    try:
        shell.run()
    except FatalEngineError as e:
        print(e, file=sys.stderr, flush=True)
        sys.exit(1)
    finally:
        save_history()

    shell.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
