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

"""Command line entry point printing the host os-release data."""

import logging
import sys
from typing import Dict, Optional

import click
import yaml

from os_release import __version__
from os_release.errors import OsReleaseError
from os_release.parser import get_os_release, parse_os_release


def _render_env(mappings: Dict[str, str]) -> str:
    return "\n".join(f"{key}={value}" for key, value in sorted(mappings.items()))


def _render_yaml(mappings: Dict[str, str]) -> str:
    return yaml.safe_dump(mappings, default_flow_style=False, sort_keys=True).rstrip(
        "\n"
    )


@click.command()
@click.version_option(__version__, prog_name="os-release")
@click.option(
    "--path",
    "path",
    type=click.Path(),
    default=None,
    help="Parse this file instead of searching the standard locations.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["env", "yaml"]),
    default="env",
    show_default=True,
    help="Output format.",
)
@click.option("--key", default=None, help="Only print the value of this key.")
@click.option("--verbose", is_flag=True, help="Log debug messages to stderr.")
def main(
    path: Optional[str], output_format: str, key: Optional[str], verbose: bool
) -> None:
    """Print the os-release data of this system."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, stream=sys.stderr, format="%(name)s: %(message)s"
        )

    try:
        if path is None:
            mappings = get_os_release()
        else:
            mappings = parse_os_release(path)
    except OsReleaseError as error:
        click.echo(f"ERROR: {error}", err=True)
        sys.exit(1)

    if key is not None:
        if key not in mappings:
            click.echo(f"ERROR: {key} is not set.", err=True)
            sys.exit(1)
        click.echo(mappings[key])
        return

    if output_format == "yaml":
        click.echo(_render_yaml(mappings))
    else:
        click.echo(_render_env(mappings))


if __name__ == "__main__":  # pragma: no cover
    main()  # pylint: disable=no-value-for-parameter
