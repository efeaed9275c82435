import shlex

from smallsh.config import MAX_ARGS, MAX_LINE, PID_MARKER
from smallsh.errors import InputRetry


def read_line(prompt):
    """
    Read one command line (newline stripped).
    Raises EOFError at end of input and InputRetry for oversized lines.
    """
    line = input(prompt)
    if len(line) > MAX_LINE - 1:
        raise InputRetry("Your input exceeded buffer space! Lets try this again.")
    return line


def expand_pid(line, pid):
    """Replace every "$$" with the shell's pid."""
    return line.replace(PID_MARKER, str(pid))


def tokenize(line):
    """
    Split a command line into an argument vector.
    Returns: list of tokens
    """
    lex = shlex.shlex(line, posix=True)
    lex.whitespace_split = True
    lex.commenters = ""
    try:
        tokens = list(lex)
    except ValueError as e:
        raise InputRetry(f"Could not parse command: {e}") from e

    if len(tokens) >= MAX_ARGS:
        raise InputRetry("Too many arguments passed. Let's try this again.")
    return tokens
