VERSION = (0, 1, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"

ARGV0 = "argmap"
DESCRIPTION = "Parse command-line arguments into a list of positional arguments and a map of options"

STDIN_FILE = "-"
READ_SIZE = 4096
GRAPH_FILE = "argmap.gv"
