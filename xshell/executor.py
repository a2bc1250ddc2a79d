import errno
import psutil
from config import STATUS_NOT_EXECUTABLE, STATUS_NOT_FOUND
from xshell.builtin import find_builtin
from xshell.errors import die, report


def run_external(argv):
    """
    Spawn argv as a child process and block until it terminates.
    The child inherits our environment and std streams, argv[0] is searched on PATH.
    Returns: exit status, negative signal number if the child was killed

    A failed fork is fatal. A program that could not be started is reported
    and counted as a failed child.
    """
    try:
        proc = psutil.Popen(argv)
    except MemoryError:
        die("fork", "out of memory")
    except OSError as e:
        if e.filename is None:
            die("fork", e)
        report(argv[0], e.strerror or e)
        if e.errno in (errno.EACCES, errno.ENOEXEC, errno.EPERM):
            return STATUS_NOT_EXECUTABLE
        return STATUS_NOT_FOUND
    except ValueError as e:
        # argv that can never reach exec, e.g. an embedded NUL
        report(argv[0], e)
        return STATUS_NOT_FOUND

    # waitpid without WUNTRACED: a stopped child is waited through
    return proc.wait()


def execute(cmd):
    """
    Run a parsed command.
    Returns: False if the shell should stop, True to keep looping
    """
    handler = find_builtin(cmd.name)
    if handler is not None:
        return handler(cmd.arguments[1:])

    run_external(cmd.arguments)
    return True
