"""Key/value source readers.

Config files hold one ``key=value`` declaration per line:

    TEST_NAME=test
    TEST_BOOL = true

The first ``=`` separates key from value. Lines without ``=`` (blank lines
included) are skipped. There is no quoting, escaping or comment syntax; a
line such as ``# note=x`` is read as the key ``# note``.

``read_dotenv`` reads the optional ``.env`` file under an ``EnvSource``. It
is parsed by python-dotenv, so it accepts the richer dotenv syntax (quotes,
comments, ``export``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from dotenv import dotenv_values

from confetti.exceptions import SourceReadError

Pair = Tuple[str, str]

# Characters trimmed from both ends of keys and values.
_TRIM = " \t\r\n"


def parse_line(line: str) -> Optional[Pair]:
    """Split one line on its first ``=``; None if the line has no ``=``."""
    key, sep, value = line.partition("=")
    if not sep:
        return None
    return key.strip(_TRIM), value.strip(_TRIM)


def parse_lines(text: str) -> Iterator[Pair]:
    """Yield pairs from config file text in line order.

    Lines end at ``\\n``; a final line without a terminator is still read.
    """
    for line in text.split("\n"):
        pair = parse_line(line)
        if pair is not None:
            yield pair


def read_pairs(path: Path | str) -> List[Pair]:
    """Read a UTF-8 config file and return its pairs in file order.

    Raises:
        SourceReadError: If the file cannot be opened, read or decoded
    """
    try:
        # newline="" keeps lone "\r" inside a line instead of splitting on it
        with open(path, "r", encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError as e:
        raise SourceReadError(
            f"parsing config file: {e.strerror or e}",
            details={"path": str(path), "reason": str(e)},
        ) from e
    except UnicodeDecodeError as e:
        raise SourceReadError(
            f"reading config file: {e.reason}",
            details={"path": str(path), "reason": str(e)},
        ) from e

    return list(parse_lines(text))


def read_dotenv(path: Path | str) -> Dict[str, str]:
    """Read a ``.env`` file with python-dotenv.

    Unlike ``read_pairs`` this accepts dotenv syntax (quotes, comments,
    ``export``). Keys declared without a value are dropped.

    Raises:
        SourceReadError: If the file cannot be opened, read or decoded
    """
    try:
        with open(path, "r", encoding="utf-8") as handle:
            values = dotenv_values(stream=handle)
    except OSError as e:
        raise SourceReadError(
            f"parsing env file: {e.strerror or e}",
            details={"path": str(path), "reason": str(e)},
        ) from e
    except UnicodeDecodeError as e:
        raise SourceReadError(
            f"reading env file: {e.reason}",
            details={"path": str(path), "reason": str(e)},
        ) from e

    return {key: value for key, value in values.items() if value is not None}


__all__ = ["Pair", "parse_line", "parse_lines", "read_pairs", "read_dotenv"]
