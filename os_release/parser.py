#
# Copyright 2021-2023 Canonical Ltd.
#
# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public
# License version 3 as published by the Free Software Foundation.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with this program; if not, write to the Free Software Foundation,
# Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301, USA.
#

"""Parser for /etc/os-release.

Format documentation at:

https://www.freedesktop.org/software/systemd/man/os-release.html
"""

from __future__ import annotations

import errno
import logging
import os
from typing import TYPE_CHECKING

from os_release.errors import (
    OsReleaseError,
    OsReleaseIOError,
    OsReleaseNotFoundError,
    OsReleaseParseError,
)
from os_release.keys import intern_key

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable, Iterator, Sequence
    from typing import BinaryIO

logger = logging.getLogger(__name__)

OS_RELEASE_PATHS: tuple[str, ...] = ("/etc/os-release", "/usr/lib/os-release")

_QUOTES = ('"', "'")

# Unicode White_Space. str.strip() would also drop the \x1c-\x1f separators.
_WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def _trim_quotes(value: str) -> str:
    # A lone quote is kept as a literal one-character value.
    if len(value) >= 2 and value[0] in _QUOTES and value[0] == value[-1]:
        return value[1:-1]
    return value


def parse_line(line: str) -> tuple[str, str] | None:
    """Parse a single os-release line.

    Values are trimmed and stripped of one pair of encapsulating quotes.
    Backslash sequences are kept literally.

    :param line: Raw line, without line terminator.

    :returns: (key, value) tuple, or None for blank and comment lines.

    :raises OsReleaseParseError: If the line has content but no '='.
    """
    line = line.strip(_WHITESPACE)
    if not line or line.startswith("#"):
        return None

    key, eq, value = line.partition("=")
    if eq != "=":
        raise OsReleaseParseError(line)

    key = intern_key(key.strip(_WHITESPACE))
    return key, _trim_quotes(value.strip(_WHITESPACE))


def parse_lines(lines: Iterable[str]) -> dict[str, str]:
    """Assemble os-release mappings from a sequence of lines.

    Later assignments of a key replace earlier ones.

    :param lines: Lines to parse, in file order.

    :returns: Dictionary of key-mappings found.

    :raises OsReleaseParseError: On the first malformed line.
    """
    mappings: dict[str, str] = {}

    for lineno, line in enumerate(lines, start=1):
        try:
            pair = parse_line(line)
        except OsReleaseParseError as error:
            raise OsReleaseParseError(error.line, lineno=lineno) from None

        if pair is None:
            continue
        key, value = pair
        mappings[key] = value

    return mappings


def parse_os_release_str(data: str) -> dict[str, str]:
    """Parse os-release content held in a string.

    :param data: String contents of an os-release file.

    :returns: Dictionary of key-mappings found in data.

    :raises OsReleaseParseError: If data contains a malformed line.
    """
    return parse_lines(data.split("\n"))


def _read_lines(path: str, file: BinaryIO) -> Iterator[str]:
    for lineno, raw in enumerate(file, start=1):
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("Ignoring undecodable line %d in %s.", lineno, path)
            yield ""


def parse_os_release(path: str | os.PathLike) -> dict[str, str]:
    """Parse the os-release file at path.

    :param path: Path to the os-release file.

    :returns: Dictionary of key-mappings found in the file. Values are
    stripped of encapsulating quotes.

    :raises OsReleaseIOError: If the file cannot be opened or read.
    :raises OsReleaseParseError: If the file contains a malformed line.
    """
    path = os.fspath(path)
    logger.debug("Parsing os-release file %s.", path)

    try:
        with open(path, "rb") as file:
            mappings = parse_lines(_read_lines(path, file))
    except OSError as error:
        raise OsReleaseIOError(path, error) from error
    except ValueError as error:
        # open() rejects paths with embedded NUL bytes.
        raise OsReleaseIOError(path, OSError(errno.EINVAL, str(error))) from error

    logger.debug("Parsed %d keys from %s.", len(mappings), path)
    return mappings


def get_os_release(
    paths: Sequence[str | os.PathLike] = OS_RELEASE_PATHS,
) -> dict[str, str]:
    """Find and parse the os-release file of the host.

    Paths are tried in order and the first one parsed successfully is used.

    :param paths: Candidate paths. Defaults to /etc/os-release followed by
    /usr/lib/os-release.

    :returns: Dictionary of key-mappings found in os-release.

    :raises OsReleaseNotFoundError: If no candidate could be parsed.
    """
    for path in paths:
        try:
            return parse_os_release(path)
        except OsReleaseError as error:
            logger.debug("Skipping %s: %s", os.fspath(path), error.brief)

    raise OsReleaseNotFoundError()
