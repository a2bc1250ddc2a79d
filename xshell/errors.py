import sys
from config import SHELL_NAME, EXIT_FAILURE


def report(context, err):
    """Print a diagnostic to stderr, perror style"""
    print(f"{SHELL_NAME}: {context}: {err}", file=sys.stderr)


def die(context, err):
    """Report a fatal condition and terminate the whole shell"""
    report(context, err)
    sys.exit(EXIT_FAILURE)
