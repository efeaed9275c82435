import os
import logging
from dataclasses import dataclass, field

from smallsh.config import NULL_DEVICE
from smallsh.errors import RedirectionError
from smallsh.signals import Role

log = logging.getLogger(__name__)

STDIN_FD = 0
STDOUT_FD = 1


@dataclass
class Redirection:
    """
    Result of splitting an argument vector on "<" and ">".

    bindings keeps every (fd, path) pair in the order it appeared, because
    each one rebinds the stream as soon as it is seen; input_path and
    output_path are the last (active) ones.
    """
    argv: list
    bindings: list = field(default_factory=list)

    @property
    def input_path(self):
        return self._last(STDIN_FD)

    @property
    def output_path(self):
        return self._last(STDOUT_FD)

    def _last(self, fd):
        paths = [path for target, path in self.bindings if target == fd]
        return paths[-1] if paths else None


def resolve(argv):
    """
    Split argv into the exec vector and redirection targets.
    A "<" or ">" with nothing after it is kept as an ordinary argument.
    Returns: Redirection
    """
    redir = Redirection(argv=[])
    i = 0
    while i < len(argv):
        tok = argv[i]
        if tok == "<" and i + 1 < len(argv):
            redir.bindings.append((STDIN_FD, argv[i + 1]))
            i += 2
        elif tok == ">" and i + 1 < len(argv):
            redir.bindings.append((STDOUT_FD, argv[i + 1]))
            i += 2
        else:
            redir.argv.append(tok)
            i += 1
    return redir


def _open_for(fd, path):
    try:
        if fd == STDIN_FD:
            return os.open(path, os.O_RDONLY)
        return os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o666)
    except OSError as e:
        direction = "input" if fd == STDIN_FD else "output"
        raise RedirectionError(f"cannot open {path} for {direction}") from e


def _rebind(fd, path):
    new_fd = _open_for(fd, path)
    # A closed stdio slot is handed straight back by open()
    if new_fd != fd:
        os.dup2(new_fd, fd)
        os.close(new_fd)


def apply(redir, role):
    """
    Bind the child's stdin/stdout according to redir.
    Background children start out on the null device so they never touch
    the terminal. Raises RedirectionError when a target cannot be opened.
    """
    if role is Role.BACKGROUND:
        _rebind(STDIN_FD, NULL_DEVICE)
        _rebind(STDOUT_FD, NULL_DEVICE)

    for fd, path in redir.bindings:
        log.debug("binding fd %d to %s", fd, path)
        _rebind(fd, path)
