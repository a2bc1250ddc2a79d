def builtin_exit(args):
    """Stop the shell loop. Arguments are ignored"""
    return False


# Looked up by exact name before anything is spawned
BUILTINS = {
    'exit': builtin_exit,
}


def find_builtin(name):
    return BUILTINS.get(name)
