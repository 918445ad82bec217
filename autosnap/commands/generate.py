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

"""Autosnap generate command."""

import argparse
import shutil
import textwrap
from pathlib import Path
from urllib.parse import urlparse

from craft_cli import BaseCommand, emit
from craft_cli.errors import ArgumentParsingError
from overrides import overrides

from autosnap import generate, sources
from autosnap.models import Options, SnapVersion, VersionStrategy


def _snap_version(value: str) -> SnapVersion:
    try:
        return SnapVersion.from_string(value)
    except ValueError as error:
        raise argparse.ArgumentTypeError(str(error)) from error


class GenerateCommand(BaseCommand):
    """Generate a snapcraft.yaml for a project."""

    name = "generate"
    help_msg = "Generate a snapcraft.yaml for a project"
    overview = textwrap.dedent(
        """
        Generate a snapcraft.yaml for a Rust, Go, Python or Gradle project.

        The source can be a local directory or the URL of a git repository,
        which is cloned first. The snapcraft.yaml is written at the root of
        the source tree; review it and fix any TODO before running snapcraft.

        The version strategy is one of 'git' (let snapcraft set the version
        from git), 'auto' (use the version declared by the project) or any
        other value, used as the version as-is.
        """
    )

    @overrides
    def fill_parser(self, parser: "argparse.ArgumentParser") -> None:
        parser.add_argument(
            "source",
            metavar="source",
            type=str,
            help=(
                "Project directory or git repository "
                "(example: https://github.com/creekorful/osync)"
            ),
        )
        parser.add_argument(
            "--version-strategy",
            dest="snap_version",
            metavar="strategy",
            type=_snap_version,
            default=SnapVersion(VersionStrategy.GIT),
            help="How to set the snap version: git, auto or a fixed version",
        )
        parser.add_argument(
            "--output-dir",
            type=Path,
            default=None,
            help="Directory to clone remote sources into (default: current directory)",
        )

    @overrides
    def run(self, parsed_args: argparse.Namespace) -> None:
        """Run the generate command.

        :param parsed_args: autosnap's argument namespace

        :raises ArgumentParsingError: If a local source is not a directory.
        """
        source: str = parsed_args.source
        cloned = False

        if sources.is_remote(source):
            work_dir = parsed_args.output_dir or Path.cwd()
            emit.progress(f"Cloning {source!r}")
            source_path = sources.fetch_source(source, work_dir)
            cloned = True
        else:
            if source.startswith("file://"):
                source = urlparse(source).path
            source_path = Path(source).resolve()
            if not source_path.is_dir():
                raise ArgumentParsingError(
                    f"source {parsed_args.source!r} is not a directory"
                )

        options = Options(
            source_name=source_path.name, snap_version=parsed_args.snap_version
        )
        emit.progress(f"Generating snapcraft.yaml for {options.source_name!r}")

        try:
            snapcraft_yaml = generate.package_source(source_path, options)
        except Exception:
            if cloned:
                emit.debug(f"Removing cloned repository {str(source_path)!r}")
                shutil.rmtree(source_path)
            raise

        emit.message(f"Successfully packaged {options.source_name!r}.")
        emit.message(f"The snapcraft file is stored at {str(snapcraft_yaml)!r}.")
        emit.message(
            f"Please fix any TODO in the file and run `cd {source_path} && snapcraft`."
        )
