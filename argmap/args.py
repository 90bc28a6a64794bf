import logging

from typing import Any, Iterable, Optional

_logger = logging.getLogger(__name__)

List = list[str]
Map = dict[str, list[str]]


def isNum(s: str) -> bool:
    """Checks if the string starts with an ASCII digit."""
    return len(s) > 0 and "0" <= s[0] <= "9"


def isBreak(s: str) -> bool:
    """Checks if the string starts with a non-alphabetic character."""
    return len(s) > 0 and not s[0].isalpha()


def _set(argv: Map, key: str, value: str):
    if key in argv:
        argv[key].append(value)
    else:
        argv[key] = [value]


def _setBool(argv: Map, key: str):
    if key not in argv:
        argv[key] = []


class ArgMap:
    """
    Splits command-line arguments into positional arguments and a map of
    option values.

    Every value stays a string. The only configuration is the set of
    boolean keys, which never take the following argument as their value.
    """

    _booleans: set[str]

    def __init__(self):
        self._booleans = set()

    def boolean(self, key: Any) -> "ArgMap":
        """
        Marks a key as boolean.

        Args:
            key: The option name, without leading dashes.

        Returns:
            The same `ArgMap`, so calls can be chained.
        """
        self._booleans.add(str(key))
        return self

    def booleans(self, keys: Iterable[Any]) -> "ArgMap":
        """Marks every key of `keys` as boolean."""
        for key in keys:
            self.boolean(key)
        return self

    def isBoolean(self, key: str) -> bool:
        return key in self._booleans

    def _parseLong(self, argv: Map, name: str) -> Optional[str]:
        """Handles `--name` and `--name=value`, returning the key left open, if any."""
        if "=" in name:
            key, value = name.split("=", 1)
            _set(argv, key, value)
            return None

        if self.isBoolean(name):
            _setBool(argv, name)
            return None

        return name

    def _parseShort(self, argv: Map, cluster: str) -> Optional[str]:
        """
        Handles `-x`, `-x=value`, `-xvalue` and clusters such as `-xvf`.

        Args:
            argv: The option map being filled.
            cluster: The argument without its leading dash.

        Returns:
            The key left open for the next argument, if any.
        """
        if "=" in cluster:
            key, value = cluster.split("=", 1)
            _set(argv, key, value)
            return None

        pending: Optional[str] = None
        for i, k in enumerate(cluster[:-1]):
            if pending is not None:
                if isNum(k) or isBreak(k):
                    # the rest of the cluster is the value: -n10, -abc+5
                    _set(argv, pending, cluster[i:])
                    return None
                _setBool(argv, pending)
                pending = None

            if self.isBoolean(k):
                _setBool(argv, k)
            else:
                pending = k

        k = cluster[-1]
        if pending is not None:
            if self.isBoolean(k):
                # the pending key stays open: -xv file gives x the value
                _setBool(argv, pending)
                _setBool(argv, k)
                return pending
            elif isNum(k) or isBreak(k):
                _set(argv, pending, k)
                return None
            else:
                _setBool(argv, pending)
                return k

        if self.isBoolean(k):
            _setBool(argv, k)
            return None

        return k

    def parse(self, input: Iterable[Any]) -> tuple[List, Map]:
        """
        Parses command-line arguments.

        The first argument (usually the program path) is not treated
        specially and ends up in the positional arguments like any other.

        Args:
            input: The arguments, converted with `str()` if needed.

        Returns:
            A tuple of the positional arguments and a dict mapping each
            option name to the list of values it was given. Options seen
            without a value map to an empty list.
        """
        args: List = []
        argv: Map = {}
        key: Optional[str] = None
        dashdash = False

        for x in input:
            s = str(x)
            if dashdash:
                args.append(s)
            elif s == "--":
                _logger.debug("Found '--', remaining arguments are positional")
                dashdash = True
            elif s == "-":
                args.append(s)
            elif s.startswith("--"):
                if key is not None:
                    _setBool(argv, key)
                key = self._parseLong(argv, s[2:])
            elif s.startswith("-"):
                if key is not None:
                    if isNum(s[1:]):
                        # negative numbers are values: -n -555
                        _set(argv, key, s)
                        key = None
                        continue
                    _setBool(argv, key)
                key = self._parseShort(argv, s[1:])
            elif key is not None:
                _set(argv, key, s)
                key = None
            else:
                args.append(s)

        if key is not None:
            _setBool(argv, key)

        _logger.debug(f"Parsed {len(args)} positional arguments and {len(argv)} options")
        return args, argv


def new() -> ArgMap:
    """Creates a new `ArgMap` with no boolean keys."""
    return ArgMap()


def parse(input: Iterable[Any]) -> tuple[List, Map]:
    """Parses command-line arguments with no boolean keys."""
    return ArgMap().parse(input)
