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

"""Generator for projects built with gradle."""

from pathlib import Path
from typing import Dict

from overrides import overrides

from autosnap.models import App, Part

from ._base import Generator, Provider

SETTINGS_GRADLE = "settings.gradle"


class GradleGenerator(Generator):
    """Generate snaps for gradle projects.

    No metadata is extracted and apps are not discovered yet, so generation
    stops at the empty apps check.
    """

    ecosystem = "gradle"

    @overrides
    def parts(self) -> Dict[str, Part]:
        return {self.source_name: Part(plugin="gradle")}

    @overrides
    def apps(self) -> Dict[str, App]:
        return {}


class GradleProvider(Provider):
    """Provide generators for trees with a settings.gradle."""

    ecosystem = "gradle"
    markers = (SETTINGS_GRADLE,)

    @classmethod
    def provide(cls, source_path: Path, source_name: str) -> GradleGenerator:
        return GradleGenerator(source_path=source_path, source_name=source_name)
