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
import textwrap

import pytest

_FEDORA_OS_RELEASE = textwrap.dedent(
    """\
    NAME=Fedora
    VERSION="24 (Workstation Edition)"
    ID=fedora
    VERSION_ID=24
    PRETTY_NAME='Fedora 24 (Workstation Edition)'
    ANSI_COLOR="0;34"
    CPE_NAME="cpe:/o:fedoraproject:fedora:24"
    HOME_URL="https://fedoraproject.org/"
    BUG_REPORT_URL="https://bugzilla.redhat.com/"
    REDHAT_BUGZILLA_PRODUCT="Fedora"
    VARIANT="Workstation Edition"
    VARIANT_ID=workstation
    """
)

_FEDORA_MAPPINGS = {
    "NAME": "Fedora",
    "VERSION": "24 (Workstation Edition)",
    "ID": "fedora",
    "VERSION_ID": "24",
    "PRETTY_NAME": "Fedora 24 (Workstation Edition)",
    "ANSI_COLOR": "0;34",
    "CPE_NAME": "cpe:/o:fedoraproject:fedora:24",
    "HOME_URL": "https://fedoraproject.org/",
    "BUG_REPORT_URL": "https://bugzilla.redhat.com/",
    "REDHAT_BUGZILLA_PRODUCT": "Fedora",
    "VARIANT": "Workstation Edition",
    "VARIANT_ID": "workstation",
}


@pytest.fixture
def write_os_release(tmp_path):
    """Write content to an os-release file in a temporary directory."""

    def _write(content, name="os-release"):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def fedora_os_release(write_os_release):
    return write_os_release(_FEDORA_OS_RELEASE)


@pytest.fixture
def fedora_content():
    return _FEDORA_OS_RELEASE


@pytest.fixture
def fedora_mappings():
    return dict(_FEDORA_MAPPINGS)
