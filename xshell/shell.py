from config import EXIT_SUCCESS
from xshell.reader import read_line
from xshell.parser import parse_line
from xshell.executor import execute
from xshell.errors import die


def main_loop():
    """
    Main shell loop: read, parse, execute until `exit`.
    End of input leaves from inside read_line.
    Returns: exit status
    """
    status = True
    while status:
        stage = "read_line"
        try:
            line = read_line()
            stage = "parse_line"
            cmd = parse_line(line)
        except MemoryError:
            die(stage, "out of memory")

        if cmd is None:
            continue

        status = execute(cmd)
        cmd.release()

    return EXIT_SUCCESS
