PROMPT = "x > "
SHELL_NAME = "xsh"

# Token separators: space, tab, CR, LF, bell
DELIMITERS = " \t\r\n\a"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

# Status recorded for a child whose program never started
STATUS_NOT_EXECUTABLE = 126
STATUS_NOT_FOUND = 127
