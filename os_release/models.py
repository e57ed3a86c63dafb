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

"""Pydantic model for parsed os-release data."""

import os
from typing import Dict, List, Optional, Union

import pydantic

from os_release import parser


class OsRelease(
    pydantic.BaseModel,
    extra="allow",
    frozen=True,
    alias_generator=str.upper,
):
    """Typed view of an os-release document.

    Every well-known key is exposed as an optional lower-case attribute.
    Vendor keys (e.g. UBUNTU_CODENAME) are kept as extra fields under their
    original name. Values are never validated beyond being strings.
    """

    ansi_color: Optional[str] = None
    architecture: Optional[str] = None
    bug_report_url: Optional[str] = None
    build_id: Optional[str] = None
    confext_level: Optional[str] = None
    confext_scope: Optional[str] = None
    cpe_name: Optional[str] = None
    default_hostname: Optional[str] = None
    documentation_url: Optional[str] = None
    home_url: Optional[str] = None
    id: Optional[str] = None
    id_like: Optional[str] = None
    image_id: Optional[str] = None
    image_version: Optional[str] = None
    logo: Optional[str] = None
    name: Optional[str] = None
    portable_prefixes: Optional[str] = None
    pretty_name: Optional[str] = None
    privacy_policy_url: Optional[str] = None
    support_end: Optional[str] = None
    support_url: Optional[str] = None
    sysext_level: Optional[str] = None
    sysext_scope: Optional[str] = None
    variant: Optional[str] = None
    variant_id: Optional[str] = None
    vendor_name: Optional[str] = None
    vendor_url: Optional[str] = None
    version: Optional[str] = None
    version_codename: Optional[str] = None
    version_id: Optional[str] = None

    @classmethod
    def unmarshal(cls, data: Dict[str, str]) -> "OsRelease":
        """Create and populate a new `OsRelease` object from parsed data.

        :param data: Mapping as returned by the os-release parser.

        :return: The newly created `OsRelease` object.
        """
        return cls.model_validate(data)

    def marshal(self) -> Dict[str, str]:
        """Create a dictionary containing the os-release data.

        :return: Mapping of upper-case keys to values, unset keys omitted.
        """
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def load(cls, path: Optional[Union[str, os.PathLike]] = None) -> "OsRelease":
        """Load os-release data from a file, or from the host.

        :param path: Path to an os-release file. If None, the standard
                     locations are searched.

        :return: The `OsRelease` object.

        :raise OsReleaseError: If no file could be parsed.
        """
        if path is None:
            data = parser.get_os_release()
        else:
            data = parser.parse_os_release(path)

        return cls.unmarshal(data)

    @property
    def id_like_list(self) -> List[str]:
        """Space-separated ID_LIKE as a list."""
        if self.id_like is None:
            return []
        return self.id_like.split()

    @property
    def display_name(self) -> str:
        """PRETTY_NAME, falling back to NAME and the "Linux" default."""
        return self.pretty_name or self.name or "Linux"
