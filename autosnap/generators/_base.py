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

"""Generator and provider base class definitions."""

import abc
from pathlib import Path
from typing import ClassVar, Dict, Optional, Tuple

from craft_cli import emit

from autosnap.models import App, Part


class Generator(abc.ABC):
    """Knows how to describe one source tree as a snap.

    Metadata accessors return None when the project does not declare the
    value, in which case the snap keeps its default. ``parts`` and ``apps``
    are mandatory.

    :param source_path: root of the source tree.
    :param source_name: name of the source, used to name the part and the
        main app.
    """

    ecosystem: ClassVar[str]
    """The ecosystem name, used in messages."""

    def __init__(self, *, source_path: Path, source_name: str) -> None:
        self.source_path = source_path
        self.source_name = source_name

    def name(self) -> Optional[str]:
        """Return the project name."""
        return None

    def version(self) -> Optional[str]:
        """Return the project version."""
        return None

    def summary(self) -> Optional[str]:
        """Return the one line project summary."""
        return None

    def description(self) -> Optional[str]:
        """Return the long project description."""
        return None

    def license(self) -> Optional[str]:
        """Return the project license as an SPDX expression."""
        return None

    @abc.abstractmethod
    def parts(self) -> Dict[str, Part]:
        """Return the parts building the project."""

    @abc.abstractmethod
    def apps(self) -> Dict[str, App]:
        """Return the apps the project provides."""

    def _app(self, name: str) -> App:
        emit.debug(f"Found executable {name!r}")
        return App(command=f"bin/{name}")


class Provider(abc.ABC):
    """Detects a project type and creates the matching generator.

    Detection only looks at the root of the tree: a marker nested in a
    subdirectory, such as a vendored dependency, does not count.
    """

    ecosystem: ClassVar[str]
    """The ecosystem name."""

    markers: ClassVar[Tuple[str, ...]]
    """Files whose presence at the root identifies the project type."""

    @classmethod
    def can_provide(cls, source_path: Path) -> bool:
        """Check if the source tree is a project of this type."""
        return any((source_path / marker).is_file() for marker in cls.markers)

    @classmethod
    @abc.abstractmethod
    def provide(cls, source_path: Path, source_name: str) -> Generator:
        """Create a generator for the source tree.

        :raises GeneratorParseError: if the project files cannot be parsed.
        """
