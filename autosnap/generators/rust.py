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

"""Generator for Rust projects built with cargo."""

from pathlib import Path
from typing import Any, Dict, List, Optional

import toml
from craft_cli import emit
from overrides import overrides

from autosnap import errors
from autosnap.models import App, Part

from ._base import Generator, Provider

CARGO_TOML = "Cargo.toml"
CARGO_LOCK = "Cargo.lock"

BUILD_PACKAGES = ["libc6-dev"]
"""Build packages every rust part needs."""

BUILD_PACKAGE_RULES: Dict[str, str] = {
    # openssl-sys and friends link against the system openssl
    "openssl-": "libssl-dev",
}
"""Build packages required when a locked dependency name has a given prefix."""


def _load_toml(path: Path) -> Dict[str, Any]:
    try:
        return toml.load(path)
    except (toml.TomlDecodeError, UnicodeDecodeError) as error:
        raise errors.GeneratorParseError(path.name, str(error)) from error
    except OSError as error:
        raise errors.GeneratorParseError(
            path.name, error.strerror or str(error)
        ) from error


def find_build_packages(cargo_lock: Optional[Dict[str, Any]]) -> List[str]:
    """Determine the build packages needed by the locked dependencies.

    :param cargo_lock: the parsed Cargo.lock, if there is one.
    :returns: the baseline build packages followed by the ones required by
        dependencies, without duplicates.
    """
    build_packages = list(BUILD_PACKAGES)
    if not cargo_lock:
        return build_packages

    for package in cargo_lock.get("package", []):
        for dependency in package.get("dependencies", []):
            # entries look like "name", "name version" or "name version (source)"
            if not isinstance(dependency, str) or not dependency.strip():
                continue
            dependency_name = dependency.split()[0]
            for prefix, build_package in BUILD_PACKAGE_RULES.items():
                if (
                    dependency_name.startswith(prefix)
                    and build_package not in build_packages
                ):
                    emit.debug(
                        f"Adding build package {build_package!r} as required by "
                        f"{package.get('name')!r}"
                    )
                    build_packages.append(build_package)

    return build_packages


class RustGenerator(Generator):
    """Generate snaps for cargo projects.

    :param cargo_toml: the parsed Cargo.toml.
    :param cargo_lock: the parsed Cargo.lock, if the project has one.
    """

    ecosystem = "rust"

    def __init__(
        self,
        *,
        source_path: Path,
        source_name: str,
        cargo_toml: Dict[str, Any],
        cargo_lock: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(source_path=source_path, source_name=source_name)
        self._cargo_toml = cargo_toml
        self._cargo_lock = cargo_lock

    def _get_package_field(self, field: str) -> Optional[str]:
        # workspace-only manifests have no package table
        package = self._cargo_toml.get("package")
        if not isinstance(package, dict):
            return None

        # inherited fields (`version.workspace = true`) are tables
        value = package.get(field)
        if not isinstance(value, str):
            return None

        emit.debug(f"Using {field} {value!r} from {CARGO_TOML}")
        return value

    @overrides
    def name(self) -> Optional[str]:
        return self._get_package_field("name")

    @overrides
    def version(self) -> Optional[str]:
        return self._get_package_field("version")

    @overrides
    def summary(self) -> Optional[str]:
        return self._get_package_field("description")

    @overrides
    def license(self) -> Optional[str]:
        return self._get_package_field("license")

    @overrides
    def parts(self) -> Dict[str, Part]:
        return {
            self.source_name: Part(
                plugin="rust",
                build_packages=find_build_packages(self._cargo_lock),
            )
        }

    @overrides
    def apps(self) -> Dict[str, App]:
        # a crate has either a single binary at src/main.rs or one binary per
        # src/bin/*.rs file
        if (self.source_path / "src" / "main.rs").is_file():
            return {self.source_name: self._app(self.source_name)}

        apps: Dict[str, App] = {}
        bin_dir = self.source_path / "src" / "bin"
        if bin_dir.is_dir():
            for entry in sorted(bin_dir.iterdir()):
                if entry.is_file() and entry.suffix == ".rs":
                    apps[entry.stem] = self._app(entry.stem)

        if not apps:
            raise errors.NoExecutableFound(
                self.source_name, "expected src/main.rs or src/bin/*.rs"
            )

        return apps


class RustProvider(Provider):
    """Provide generators for trees with a Cargo.toml."""

    ecosystem = "rust"
    markers = (CARGO_TOML,)

    @classmethod
    def provide(cls, source_path: Path, source_name: str) -> RustGenerator:
        cargo_toml = _load_toml(source_path / CARGO_TOML)

        cargo_lock = None
        if (source_path / CARGO_LOCK).is_file():
            cargo_lock = _load_toml(source_path / CARGO_LOCK)

        return RustGenerator(
            source_path=source_path,
            source_name=source_name,
            cargo_toml=cargo_toml,
            cargo_lock=cargo_lock,
        )
