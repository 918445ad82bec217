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

"""Constants used in autosnap."""

SNAPCRAFT_YAML = "snapcraft.yaml"
"""File name of the generated project file."""

SNAPCRAFT_YAML_LOCATIONS = (
    SNAPCRAFT_YAML,
    f".{SNAPCRAFT_YAML}",
    f"snap/{SNAPCRAFT_YAML}",
    f"build-aux/snap/{SNAPCRAFT_YAML}",
)
"""Locations, relative to the source root, that mark a tree as packaged."""

DEFAULT_BASE = "core18"

DEFAULT_GRADE = "stable"

DEFAULT_CONFINEMENT = "strict"

GIT_VERSION = "git"
"""Version value that lets snapcraft derive the version from git."""

PLACEHOLDER = "TODO"
"""Value for fields the user is expected to fill in by hand."""

PART_SOURCE = "."
