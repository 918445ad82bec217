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

import os
import subprocess


def determine_version():
    """Derive the package version from ``git describe``.

    1.2.0-0-gad012482d -> 1.2.0
    1.2.0-16-g2d8943dbc -> 1.2.0.post16+git2d8943dbc

    Outside of a git checkout, or without tags, fall back to SNAP_VERSION.
    """
    desc = subprocess.run(
        ["git", "describe", "--tags", "--long"],
        stdout=subprocess.PIPE,
        stderr=subprocess.DEVNULL,
        check=False,
        text=True,
    ).stdout.strip()

    if not desc:
        return os.environ.get("SNAP_VERSION", "0.0.0+devel")

    version, distance, commit = desc.rsplit("-", 2)

    if distance == "0":
        return version

    return f"{version}.post{distance}+git{commit[1:]}"


if __name__ == "__main__":
    print(determine_version())
