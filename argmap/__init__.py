import sys
import logging

from . import (
    args,
    const,
    dump,
    vt100,
)

from .args import ArgMap, List, Map, new, parse

__all__ = ["ArgMap", "List", "Map", "new", "parse", "ensure", "main"]

_logger = logging.getLogger(__name__)


def ensure(version: tuple[int, int, int]):
    if (
        const.VERSION[0] == version[0]
        and const.VERSION[1] == version[1]
        and const.VERSION[2] >= version[2]
    ):
        return

    raise RuntimeError(
        f"Expected argmap version {version[0]}.{version[1]}.{version[2]} but found {const.VERSION_STR}"
    )


def main() -> int:
    try:
        return dump.run(sys.argv)

    except RuntimeError as e:
        _logger.debug(str(e), exc_info=True)
        vt100.error(str(e))
        return 1

    except KeyboardInterrupt:
        print()
        return 1
