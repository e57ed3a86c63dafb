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

import logging

import pytest
import yaml
from click.testing import CliRunner
from os_release import __version__, cli
from os_release.errors import OsReleaseNotFoundError


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def mock_get_os_release(mocker):
    return mocker.patch(
        "os_release.cli.get_os_release",
        return_value={"NAME": "Ubuntu", "ID": "ubuntu", "VERSION_ID": "22.04"},
    )


def test_main_discovers(runner, mock_get_os_release):
    result = runner.invoke(cli.main, [])

    assert result.exit_code == 0
    assert result.output == "ID=ubuntu\nNAME=Ubuntu\nVERSION_ID=22.04\n"
    mock_get_os_release.assert_called_once_with()


def test_main_yaml(runner, mock_get_os_release):
    result = runner.invoke(cli.main, ["--format", "yaml"])

    assert result.exit_code == 0
    assert yaml.safe_load(result.output) == {
        "NAME": "Ubuntu",
        "ID": "ubuntu",
        "VERSION_ID": "22.04",
    }


def test_main_key(runner, mock_get_os_release):
    result = runner.invoke(cli.main, ["--key", "ID"])

    assert result.exit_code == 0
    assert result.output == "ubuntu\n"


def test_main_missing_key(runner, mock_get_os_release):
    result = runner.invoke(cli.main, ["--key", "VARIANT_ID"])

    assert result.exit_code == 1
    assert "ERROR: VARIANT_ID is not set." in result.output


def test_main_path(runner, fedora_os_release, mock_get_os_release):
    result = runner.invoke(cli.main, ["--path", str(fedora_os_release)])

    assert result.exit_code == 0
    assert "PRETTY_NAME=Fedora 24 (Workstation Edition)\n" in result.output
    mock_get_os_release.assert_not_called()


def test_main_path_malformed(runner, write_os_release):
    path = write_os_release("SOMETHING\n")

    result = runner.invoke(cli.main, ["--path", str(path)])

    assert result.exit_code == 1
    assert "ERROR: File is malformed." in result.output


def test_main_path_missing(runner, tmp_path):
    result = runner.invoke(cli.main, ["--path", str(tmp_path / "missing")])

    assert result.exit_code == 1
    assert "ERROR: Failed to read os-release file" in result.output


def test_main_not_found(runner, mocker):
    mocker.patch(
        "os_release.cli.get_os_release", side_effect=OsReleaseNotFoundError()
    )

    result = runner.invoke(cli.main, [])

    assert result.exit_code == 1
    assert "ERROR: Failed to find os-release file." in result.output


def test_main_version(runner):
    result = runner.invoke(cli.main, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_main_verbose(runner, mocker, fedora_os_release):
    mock_basic_config = mocker.patch("logging.basicConfig")

    result = runner.invoke(cli.main, ["--verbose", "--path", str(fedora_os_release)])

    assert result.exit_code == 0
    mock_basic_config.assert_called_once_with(
        level=logging.DEBUG, stream=mocker.ANY, format="%(name)s: %(message)s"
    )


def test_main_verbose_logs_parsing(runner, mocker, fedora_os_release, logs):
    mocker.patch("logging.basicConfig")

    result = runner.invoke(cli.main, ["--verbose", "--path", str(fedora_os_release)])

    assert result.exit_code == 0
    assert f"Parsing os-release file {fedora_os_release}" in logs.debug


def test_main_not_verbose(runner, mocker, mock_get_os_release):
    mock_basic_config = mocker.patch("logging.basicConfig")

    result = runner.invoke(cli.main, [])

    assert result.exit_code == 0
    mock_basic_config.assert_not_called()
