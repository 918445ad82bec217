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

"""Generated snapcraft.yaml definition."""

from __future__ import annotations

from typing import Any, Literal

import pydantic
from craft_application import models

from autosnap import const, yaml_utils


class Part(models.CraftBaseModel):
    """A snapcraft part, the unit snapcraft builds."""

    plugin: str = pydantic.Field(
        description="The plugin that drives the build of the part.",
        examples=["rust", "go"],
    )

    source: str = pydantic.Field(
        default=const.PART_SOURCE,
        description="The location of the part's source, relative to the project.",
    )

    build_packages: list[str] | None = pydantic.Field(
        default=None,
        description="System packages required to build the part.",
        examples=[["libc6-dev", "libssl-dev"]],
    )

    stage_packages: list[str] | None = pydantic.Field(
        default=None,
        description="System packages required at runtime.",
    )

    go_import_path: str | None = pydantic.Field(
        default=None,
        description="The import path of a go module.",
        examples=["github.com/creekorful/osync"],
    )

    python_version: str | None = pydantic.Field(
        default=None,
        description="The python interpreter used to build the part.",
        examples=["python3"],
    )


class App(models.CraftBaseModel):
    """A snapcraft app, a command exposed by the snap."""

    command: str = pydantic.Field(
        description="The command to run, relative to the snap root.",
        examples=["bin/osync"],
    )

    plugs: list[str] | None = pydantic.Field(
        default=None,
        description="Interfaces the app connects to.",
    )


class Snap(models.CraftBaseModel):
    """The snapcraft.yaml produced for a project.

    The defaults are the values used when nothing better can be extracted
    from the project; ``TODO`` marks fields the user should review.
    """

    name: str
    base: str = const.DEFAULT_BASE
    version: str = const.GIT_VERSION
    summary: str = const.PLACEHOLDER
    description: str = const.PLACEHOLDER
    license: str = const.PLACEHOLDER
    grade: Literal["stable", "devel"] = const.DEFAULT_GRADE
    confinement: Literal["strict", "devmode", "classic"] = const.DEFAULT_CONFINEMENT
    parts: dict[str, Part] = pydantic.Field(default_factory=dict)
    apps: dict[str, App] = pydantic.Field(default_factory=dict)

    @classmethod
    def new(cls, name: str) -> Snap:
        """Create a snap with default values for the given name."""
        return cls(name=name)

    def marshal(self) -> dict[str, Any]:
        """Return the snap as a dictionary ready to be serialized.

        Unset optional fields are omitted, parts and apps are sorted by name.
        """
        data = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        data["parts"] = dict(sorted(data["parts"].items()))
        data["apps"] = dict(sorted(data["apps"].items()))
        return data

    def to_yaml(self) -> str:
        """Render the snap as a snapcraft.yaml document."""
        return str(yaml_utils.dump(self.marshal()))
