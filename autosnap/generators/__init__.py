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

"""Generator selection for source trees."""

from pathlib import Path
from typing import List, Tuple, Type

from craft_cli import emit

from autosnap import errors

from ._base import Generator, Provider
from .go import GoProvider
from .gradle import GradleProvider
from .python import PythonProvider
from .rust import RustProvider

PROVIDERS: Tuple[Type[Provider], ...] = (
    RustProvider,
    GoProvider,
    PythonProvider,
    GradleProvider,
)
"""Known providers. The first one able to handle a tree wins."""


def get_provider_names() -> List[str]:
    """Return the supported ecosystems in dispatch order."""
    return [provider.ecosystem for provider in PROVIDERS]


def find_generator(source_path: Path, source_name: str) -> Generator:
    """Return a generator for the source tree.

    Errors raised while creating the generator are not caught, the next
    provider is not tried.

    :param source_path: root of the source tree.
    :param source_name: name of the source.
    :raises NoApplicableGenerator: if no provider handles the tree.
    """
    for provider in PROVIDERS:
        if provider.can_provide(source_path):
            emit.debug(f"Using the {provider.ecosystem} generator for {source_name!r}")
            return provider.provide(source_path, source_name)

    raise errors.NoApplicableGenerator(source_name, get_provider_names())


__all__ = [
    "PROVIDERS",
    "Generator",
    "Provider",
    "find_generator",
    "get_provider_names",
]
