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

"""Autosnap error definitions."""

from typing import Sequence

from craft_cli import CraftError

from autosnap import utils


class AutosnapError(CraftError):
    """Failure in an autosnap operation."""


class NoApplicableGenerator(AutosnapError):
    """No registered generator knows how to package the source tree.

    :param source_name: The name of the source tree.
    :param supported: Names of the supported ecosystems.
    """

    def __init__(self, source_name: str, supported: Sequence[str]) -> None:
        self.source_name = source_name
        super().__init__(
            f"No generator found for {source_name!r}.",
            resolution=(
                "Supported project types are "
                f"{utils.humanize_list(supported, 'and', sort=False)}. "
                "Consider contributing support for this project type."
            ),
        )


class GeneratorParseError(AutosnapError):
    """A manifest or lock file could not be read or parsed."""

    def __init__(self, filename: str, message: str) -> None:
        self.filename = filename
        super().__init__(f"Error parsing {filename!r}: {message}")


class GeneratorSubprocessError(AutosnapError):
    """An external tool needed by a generator could not be run."""

    def __init__(self, command: Sequence[str], message: str) -> None:
        self.command = list(command)
        super().__init__(f"Failed to run {' '.join(command)!r}: {message}")


class InterpreterNotFound(AutosnapError):
    """The interpreter required to query a project is not installed."""

    def __init__(self, interpreter: str) -> None:
        self.interpreter = interpreter
        super().__init__(
            f"Cannot find {interpreter!r} on the PATH.",
            resolution=f"Install {interpreter!r} and try again.",
        )


class NoExecutableFound(AutosnapError):
    """No executable could be discovered for the project."""

    def __init__(self, source_name: str, details: str = "") -> None:
        message = f"No executable found for {source_name!r}"
        if details:
            message += f": {details}"
        super().__init__(message + ".")


class EmptyPartsOrApps(AutosnapError):
    """The generated snap would have no parts or no apps.

    :param kind: Either ``parts`` or ``apps``.
    :param generator: The name of the generator that produced the result.
    """

    def __init__(self, kind: str, generator: str) -> None:
        self.kind = kind
        self.generator = generator
        super().__init__(
            f"The {generator} generator produced no {kind}.",
            resolution=f"Declare {kind} manually in snapcraft.yaml.",
        )


class AlreadyPackaged(AutosnapError):
    """The source tree already carries a snapcraft.yaml."""

    def __init__(self, source_name: str) -> None:
        self.source_name = source_name
        super().__init__(f"{source_name!r} is already packaged.")


class SourceFetchError(AutosnapError):
    """The source could not be fetched."""

    def __init__(self, url: str, message: str) -> None:
        self.url = url
        super().__init__(
            f"Failed to fetch {url!r}: {message}",
            resolution="Make sure the repository URL is correct and reachable.",
        )
