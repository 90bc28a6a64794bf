import sys
import logging
import textwrap
import dataclasses as dt

from typing import BinaryIO

from . import args as am, const, logger, vt100

_logger = logging.getLogger(__name__)

USAGE = textwrap.dedent(
    """\
    usage: {} {{OPTIONS}} [FILE]

      Count the number of bytes, words, or lines in a file or stdin.

        -i, --infile  Count words from FILE or '-' for stdin (default).
        -c, --bytes   Show number of bytes.
        -w, --words   Show number of words.
        -l, --lines   Show number of lines.
        -h, --help    Show this message.
            --verbose Enable verbose logging.
    """
)


@dt.dataclass
class Counts:
    lines: int = 0
    words: int = 0
    bytes: int = 0


def parser() -> am.ArgMap:
    return am.new().booleans(
        ["h", "help", "c", "bytes", "w", "words", "l", "lines", "verbose"]
    )


def inputFile(args: am.List, argv: am.Map) -> str:
    """
    Picks the file to count: `--infile=FILE`, then `-i FILE`, then the
    first positional argument after the program name, then stdin.
    """
    for key in ("infile", "i"):
        values = argv.get(key)
        if values:
            return values[0]

    if len(args) > 1:
        return args[1]

    return const.STDIN_FILE


def count(stream: BinaryIO, name: str = const.STDIN_FILE) -> Counts:
    chunks: list[bytes] = []
    while True:
        chunk = stream.read(const.READ_SIZE)
        if not chunk:
            break
        chunks.append(chunk)

    data = b"".join(chunks)
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise RuntimeError(f"{name} is not valid UTF-8: {e.reason}")

    lines = text.count("\n")
    if text and not text.endswith("\n"):
        lines += 1

    return Counts(lines, len(text.split()), len(data))


def countFile(path: str) -> Counts:
    if path == const.STDIN_FILE:
        return count(sys.stdin.buffer)

    _logger.debug(f"Counting {path}")
    try:
        with open(path, "rb") as f:
            return count(f, path)
    except OSError as e:
        raise RuntimeError(f"Could not open {path}: {e.strerror}")


def formatCounts(counts: Counts, lines: bool, words: bool, bytes: bool) -> str:
    res = ""
    if lines:
        res += f"{counts.lines:>4} "
    if words:
        res += f"{counts.words:>4} "
    if bytes:
        res += f"{counts.bytes:>4} "
    return res.rstrip()


def run(argv: list[str]) -> int:
    args, opts = parser().parse(argv)
    logger.setup("verbose" in opts)
    _logger.debug(f"args={args} argv={opts}")

    if "h" in opts or "help" in opts:
        print(USAGE.format(args[0] if len(args) > 0 else "???"))
        return 0

    showBytes = "c" in opts or "bytes" in opts
    showWords = "w" in opts or "words" in opts
    showLines = "l" in opts or "lines" in opts
    if not showBytes and not showWords and not showLines:
        showBytes = showWords = showLines = True

    counts = countFile(inputFile(args, opts))
    print(formatCounts(counts, showLines, showWords, showBytes))
    return 0


def main() -> int:
    try:
        return run(sys.argv)

    except RuntimeError as e:
        _logger.debug(str(e), exc_info=True)
        vt100.error(str(e))
        return 1

    except KeyboardInterrupt:
        print()
        return 1


if __name__ == "__main__":
    sys.exit(main())
