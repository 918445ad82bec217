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

"""Generation options."""

import enum
from dataclasses import dataclass, field
from typing import Optional


class VersionStrategy(str, enum.Enum):
    """How the snap version is determined."""

    GIT = "git"
    """Let snapcraft set the version from git at build time."""

    AUTO = "auto"
    """Use the version declared by the project, if any."""

    FIXED = "fixed"
    """Use a version given by the caller."""

    def __str__(self) -> str:
        """Stringify the value."""
        return str(self.value)


@dataclass(frozen=True)
class SnapVersion:
    """The version strategy and, for fixed versions, the version itself."""

    strategy: VersionStrategy
    value: Optional[str] = None

    @classmethod
    def from_string(cls, text: str) -> "SnapVersion":
        """Parse the textual form used on the command line.

        ``git`` and ``auto`` select the matching strategy, anything else is
        taken as a fixed version.

        :raises ValueError: if the text is empty.
        """
        if not text:
            raise ValueError("snap version cannot be empty")

        if text == VersionStrategy.GIT.value:
            return cls(VersionStrategy.GIT)
        if text == VersionStrategy.AUTO.value:
            return cls(VersionStrategy.AUTO)
        return cls(VersionStrategy.FIXED, text)


@dataclass
class Options:
    """Options driving the generation of a snap."""

    source_name: str
    snap_version: SnapVersion = field(
        default_factory=lambda: SnapVersion(VersionStrategy.GIT)
    )
