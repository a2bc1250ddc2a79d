import sys
from config import PROMPT, EXIT_SUCCESS
from xshell.errors import die


def read_line(prompt=PROMPT):
    """
    Print the prompt and block until one full line is read from stdin.
    Returns: the line without its terminator.

    End of input exits the shell with status 0, Ctrl+C returns an empty line,
    any other read error is fatal.
    """
    try:
        return input(prompt)
    except EOFError:
        sys.exit(EXIT_SUCCESS)
    except KeyboardInterrupt:
        # Ctrl+C at the prompt drops the line, the shell keeps going
        print()
        return ""
    except (OSError, UnicodeDecodeError) as e:
        die("read_line", e)
