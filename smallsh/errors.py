class ShellError(Exception):
    """Base class for smallsh errors."""


class InputRetry(ShellError):
    """The current line was rejected; print the message and prompt again."""


class RedirectionError(ShellError):
    """A redirection target could not be opened (raised in the child only)."""


class FatalEngineError(ShellError):
    """fork() or a foreground wait failed; the shell cannot continue."""
