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

"""Well-known os-release keys."""

import bisect

# Must stay sorted, lookups are binary searches.
WELL_KNOWN_KEYS: tuple[str, ...] = (
    "ANSI_COLOR",
    "ARCHITECTURE",
    "BUG_REPORT_URL",
    "BUILD_ID",
    "CONFEXT_LEVEL",
    "CONFEXT_SCOPE",
    "CPE_NAME",
    "DEFAULT_HOSTNAME",
    "DOCUMENTATION_URL",
    "HOME_URL",
    "ID",
    "ID_LIKE",
    "IMAGE_ID",
    "IMAGE_VERSION",
    "LOGO",
    "NAME",
    "PORTABLE_PREFIXES",
    "PRETTY_NAME",
    "PRIVACY_POLICY_URL",
    "SUPPORT_END",
    "SUPPORT_URL",
    "SYSEXT_LEVEL",
    "SYSEXT_SCOPE",
    "VARIANT",
    "VARIANT_ID",
    "VENDOR_NAME",
    "VENDOR_URL",
    "VERSION",
    "VERSION_CODENAME",
    "VERSION_ID",
)


def _index(key: str) -> int | None:
    index = bisect.bisect_left(WELL_KNOWN_KEYS, key)
    if index < len(WELL_KNOWN_KEYS) and WELL_KNOWN_KEYS[index] == key:
        return index
    return None


def is_well_known(key: str) -> bool:
    """Check if key is one of the standard os-release keys (case-sensitive)."""
    return _index(key) is not None


def intern_key(key: str) -> str:
    """Return the shared constant for a well-known key, or key unchanged.

    :param key: Trimmed key as found in an os-release file.

    :returns: The string object from WELL_KNOWN_KEYS if key is well-known,
    otherwise key itself.
    """
    index = _index(key)
    if index is None:
        return key
    return WELL_KNOWN_KEYS[index]
