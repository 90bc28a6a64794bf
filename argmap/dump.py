import logging

from . import args as am, const, graph, logger, vt100

_logger = logging.getLogger(__name__)

OPTIONS = [
    ("-b", "--boolean=NAME", "Treat NAME as a boolean key, can be repeated"),
    ("-g", "--graph", "Render the result with graphviz"),
    ("", "--verbose", "Enable verbose logging"),
    ("-v", "--version", "Show current version"),
    ("-h", "--help", "Show this message"),
]


def parser() -> am.ArgMap:
    return am.new().booleans(["g", "graph", "verbose", "v", "version", "h", "help"])


def usage(argv0: str):
    vt100.title(const.ARGV0)
    print()

    vt100.subtitle("Usage")
    print(vt100.indent(f"{argv0} [OPTIONS] -- ARGS..."))
    print()

    vt100.subtitle("Description")
    print(vt100.indent(const.DESCRIPTION))
    print()

    vt100.subtitle("Options")
    for short, long, description in OPTIONS:
        flag = f"{short}, {long}" if short else f"    {long}"
        print(vt100.indent(f"{vt100.GREEN}{flag:<20}{vt100.RESET} {description}"))
    print()


def dump(args: am.List, argv: am.Map) -> str:
    return f"args={args!r}\nargv={argv!r}"


def run(argv: list[str]) -> int:
    tokens: list[str] = []
    if "--" in argv:
        i = argv.index("--")
        argv, tokens = argv[:i], argv[i + 1 :]

    args, opts = parser().parse(argv)
    logger.setup("verbose" in opts)

    if "h" in opts or "help" in opts:
        usage(args[0] if len(args) > 0 else const.ARGV0)
        return 0

    if "v" in opts or "version" in opts:
        print(f"argmap v{const.VERSION_STR}")
        return 0

    booleans = opts.get("b", []) + opts.get("boolean", [])
    _logger.debug(f"Parsing {tokens} with booleans {booleans}")

    result = am.new().booleans(booleans).parse(tokens)
    print(dump(*result))

    if "g" in opts or "graph" in opts:
        graph.view(*result)

    return 0
