"""
xshell - a minimal interactive command shell.

Reads a line, splits it into a command and runs it as a child process,
waiting for it before prompting again. `exit` is the only builtin.
"""
