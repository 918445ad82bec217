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

"""Generate a snapcraft.yaml for a source tree."""

from pathlib import Path

from craft_cli import emit

from autosnap import const, errors, generators, licenses
from autosnap.models import Options, Snap, VersionStrategy


def is_packaged(source_path: Path) -> bool:
    """Check if the source tree already has a snapcraft project file."""
    return any(
        (source_path / location).exists()
        for location in const.SNAPCRAFT_YAML_LOCATIONS
    )


def generate(source_path: Path, options: Options) -> Snap:
    """Generate the snap definition for a source tree.

    :param source_path: root of the source tree.
    :param options: the generation options.
    :returns: a snap with at least one part and one app.
    :raises NoApplicableGenerator: if the project type is not supported.
    :raises EmptyPartsOrApps: if no part or no app could be determined.
    """
    generator = generators.find_generator(source_path, options.source_name)

    snap = Snap.new(options.source_name)

    snap_version = options.snap_version
    if snap_version.strategy == VersionStrategy.FIXED and snap_version.value:
        snap.version = snap_version.value

    license_id = licenses.detect_license(source_path)
    if license_id:
        emit.debug(f"Detected license {license_id!r}")
        snap.license = license_id

    name = generator.name()
    if name:
        snap.name = name

    if snap_version.strategy == VersionStrategy.AUTO:
        version = generator.version()
        if version:
            snap.version = version

    summary = generator.summary()
    if summary:
        snap.summary = summary

    description = generator.description()
    if description:
        snap.description = description

    # the declared license takes precedence over the detected one
    license_ = generator.license()
    if license_:
        snap.license = license_

    snap.parts = generator.parts()
    if not snap.parts:
        raise errors.EmptyPartsOrApps("parts", generator.ecosystem)

    snap.apps = generator.apps()
    if not snap.apps:
        raise errors.EmptyPartsOrApps("apps", generator.ecosystem)

    return snap


def package_source(source_path: Path, options: Options) -> Path:
    """Generate and write the snapcraft.yaml of a source tree.

    :returns: the path of the written file.
    :raises AlreadyPackaged: if the source tree has a snapcraft.yaml.
    """
    if is_packaged(source_path):
        raise errors.AlreadyPackaged(options.source_name)

    snap = generate(source_path, options)

    snapcraft_yaml = source_path / const.SNAPCRAFT_YAML
    snapcraft_yaml.write_text(snap.to_yaml(), encoding="utf-8")
    emit.debug(f"Wrote {str(snapcraft_yaml)!r}")

    return snapcraft_yaml
