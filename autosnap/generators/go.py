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

"""Generator for Go projects using go modules."""

import os
from pathlib import Path
from typing import Dict, Optional

from craft_cli import emit
from overrides import overrides

from autosnap import errors
from autosnap.models import App, Part

from ._base import Generator, Provider

GO_MOD = "go.mod"

BUILD_PACKAGES = ["gcc", "libc6-dev"]

GO_MOD_DIRECTIVES: Dict[str, str] = {
    "module ": "import_path",
    "go ": "go_version",
}
"""go.mod line prefixes and the GoModule attribute they set."""

GO_MAIN_MARKERS = ("package main", "func main()")
"""Substrings that all appear in a file defining a go executable."""


class GoModule:
    """The parts of a go.mod file autosnap cares about.

    Only the first line matching each directive is used.
    """

    def __init__(self) -> None:
        self.import_path: Optional[str] = None
        self.go_version: Optional[str] = None

    @classmethod
    def parse(cls, content: str) -> "GoModule":
        """Parse the content of a go.mod file."""
        module = cls()
        for line in content.splitlines():
            for prefix, attribute in GO_MOD_DIRECTIVES.items():
                if line.startswith(prefix) and getattr(module, attribute) is None:
                    setattr(module, attribute, line[len(prefix) :].strip())
        return module


def is_main_file(path: Path) -> bool:
    """Check if a go source file defines an executable."""
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        emit.debug(f"Ignoring {str(path)!r}: not a text file")
        return False

    return all(marker in content for marker in GO_MAIN_MARKERS)


def find_apps(source_path: Path) -> Dict[str, App]:
    """Find the go executables anywhere in the source tree.

    Each file declaring a main function in package main yields an app named
    after the file.
    """
    apps: Dict[str, App] = {}
    for root, directories, file_names in os.walk(source_path):
        directories.sort()
        for file_name in sorted(file_names):
            path = Path(root, file_name)
            if path.suffix == ".go" and is_main_file(path):
                emit.debug(f"Found executable {path.stem!r} in {str(path)!r}")
                apps[path.stem] = App(command=f"bin/{path.stem}")
    return apps


class GoGenerator(Generator):
    """Generate snaps for go module projects."""

    ecosystem = "go"

    def __init__(
        self, *, source_path: Path, source_name: str, go_module: GoModule
    ) -> None:
        super().__init__(source_path=source_path, source_name=source_name)
        self.go_module = go_module

    @overrides
    def parts(self) -> Dict[str, Part]:
        return {
            self.source_name: Part(
                plugin="go",
                build_packages=list(BUILD_PACKAGES),
                go_import_path=self.go_module.import_path,
            )
        }

    @overrides
    def apps(self) -> Dict[str, App]:
        return find_apps(self.source_path)


class GoProvider(Provider):
    """Provide generators for trees with a go.mod."""

    ecosystem = "go"
    markers = (GO_MOD,)

    @classmethod
    def provide(cls, source_path: Path, source_name: str) -> GoGenerator:
        go_mod = source_path / GO_MOD
        try:
            go_module = GoModule.parse(go_mod.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as error:
            raise errors.GeneratorParseError(GO_MOD, str(error)) from error

        emit.debug(
            f"Using go import path {go_module.import_path!r} and "
            f"go version {go_module.go_version!r} from {GO_MOD}"
        )
        return GoGenerator(
            source_path=source_path, source_name=source_name, go_module=go_module
        )
