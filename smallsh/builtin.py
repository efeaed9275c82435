import os


def builtin_cd(args):
    """Change directory. No argument goes to $HOME."""
    if len(args) > 1:
        print("Error: Too many arguments passed. Expected 0 or 1.", flush=True)
        return False

    path = args[0] if args else os.getenv("HOME") or os.path.expanduser("~")
    try:
        os.chdir(os.path.expanduser(path))
    except OSError:
        print("Error: Not a valid directory", flush=True)
        return False
    return True


def builtin_status(last_outcome):
    """Print how the last foreground command ended."""
    print(last_outcome, flush=True)


def execute_builtin(args, shell):
    """
    Run a built-in command if args names one.
    Returns: True if handled
    """
    cmd, rest = args[0], args[1:]

    if cmd == "cd":
        builtin_cd(rest)
    elif cmd == "status":
        builtin_status(shell.last_outcome)
    elif cmd == "jobs":
        shell.jobs.show()
    else:
        return False
    return True
