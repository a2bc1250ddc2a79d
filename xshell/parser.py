import shlex
from dataclasses import dataclass
from config import DELIMITERS


@dataclass
class Command:
    """
    One parsed input line.

    arguments[0] is the program name, the rest are passed to it as-is.
    A Command lives for a single loop iteration; release() drops its tokens.
    """
    arguments: list

    @property
    def name(self):
        return self.arguments[0]

    @property
    def count(self):
        return len(self.arguments)

    def release(self):
        self.arguments.clear()


def split_tokens(line):
    """Split line on runs of DELIMITERS, no quoting or escaping"""
    lex = shlex.shlex(line, posix=True)
    lex.whitespace = DELIMITERS
    lex.whitespace_split = True
    lex.quotes = ""
    lex.escape = ""
    lex.commenters = ""
    return list(lex)


def parse_line(line):
    """
    Parse a raw input line into a Command.
    Returns: Command, or None if the line holds only delimiters
    """
    tokens = split_tokens(line)
    if not tokens:
        return None
    return Command(tokens)
