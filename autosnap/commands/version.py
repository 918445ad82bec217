# -*- Mode:Python; indent-tabs-mode:nil; tab-width:4 -*-
#
# Copyright 2024 Canonical Ltd.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3 as
# published by the Free Software Foundation.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

"""Autosnap version command."""

import argparse

from craft_cli import BaseCommand, emit
from overrides import overrides

from autosnap import __version__, generators, utils


class VersionCommand(BaseCommand):
    """Show the autosnap version and the project types it can package."""

    name = "version"
    help_msg = "Show the application version and exit"
    overview = (
        "Show the application version and exit. "
        "Run with --verbosity=debug to also list the supported project types."
    )
    common = True

    @overrides
    def run(self, parsed_args: argparse.Namespace) -> None:
        emit.message(f"autosnap {__version__}")
        emit.debug(
            "Supported project types: "
            + utils.humanize_list(generators.get_provider_names(), "and", sort=False)
        )
