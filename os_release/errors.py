#
# Copyright 2023 Canonical Ltd.
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

"""os-release errors."""
import dataclasses
import os
from typing import Optional, Union


@dataclasses.dataclass
class OsReleaseError(Exception):
    """Unexpected error.

    :param brief: Brief description of error.
    :param details: Detailed information.
    :param resolution: Recommendation, if any.
    """

    brief: str
    details: Optional[str] = None
    resolution: Optional[str] = None

    def __str__(self) -> str:
        parts = [self.brief]

        if self.details:
            parts.append(self.details)

        if self.resolution:
            parts.append(self.resolution)

        return "\n".join(parts)


class OsReleaseIOError(OsReleaseError):
    """Failed to open or read an os-release file.

    :param path: Path of the file.
    :param error: Underlying OS error.
    """

    def __init__(self, path: Union[str, os.PathLike], error: OSError) -> None:
        self.path = os.fspath(path)
        self.error = error

        brief = f"Failed to read os-release file {self.path!r}."
        details = f"* Error: {error.strerror or error}"

        super().__init__(brief=brief, details=details)


class OsReleaseNotFoundError(OsReleaseError):
    """No os-release file could be parsed from the standard locations."""

    def __init__(self) -> None:
        brief = "Failed to find os-release file."
        resolution = (
            "Ensure /etc/os-release or /usr/lib/os-release exists and is readable."
        )

        super().__init__(brief=brief, resolution=resolution)


class OsReleaseParseError(OsReleaseError):
    """A line is neither blank, a comment, nor a key=value assignment.

    :param line: The offending line, trimmed.
    :param lineno: 1-based line number, if known.
    """

    def __init__(self, line: str, *, lineno: Optional[int] = None) -> None:
        self.line = line
        self.lineno = lineno

        brief = "File is malformed."
        if lineno is None:
            details = f"* Line without '=': {line!r}"
        else:
            details = f"* Line {lineno} without '=': {line!r}"

        super().__init__(brief=brief, details=details)
