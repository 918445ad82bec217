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

"""Fetch the source trees to package."""

import re
from pathlib import Path
from urllib.parse import urlparse

import pygit2
from craft_cli import emit

from autosnap import errors

# user@host:path, as accepted by git for ssh remotes
_SCP_LIKE_URL = re.compile(r"^[\w.-]+@[\w.-]+:")


def is_remote(source: str) -> bool:
    """Check if source designates a remote repository rather than a directory."""
    if _SCP_LIKE_URL.match(source):
        return True

    scheme = urlparse(source).scheme
    # single letter schemes are windows drive letters
    return len(scheme) > 1 and scheme != "file"


def get_source_name(source: str) -> str:
    """Return the name of a source, the last segment of its path or URL."""
    path = urlparse(source).path if "://" in source else source
    name = re.split(r"[/:]", path.rstrip("/"))[-1]
    if name.endswith(".git"):
        name = name[: -len(".git")]
    return name


def fetch_source(url: str, work_dir: Path) -> Path:
    """Clone a git repository into work_dir.

    :param url: the repository URL.
    :param work_dir: the directory to clone into.
    :returns: the path of the cloned tree, ``work_dir/<source name>``.
    :raises SourceFetchError: if the repository cannot be cloned.
    """
    source_name = get_source_name(url)
    if not source_name:
        raise errors.SourceFetchError(url, "cannot determine the repository name")

    path = work_dir / source_name
    if path.exists():
        raise errors.SourceFetchError(url, f"{str(path)!r} already exists")

    emit.debug(f"Cloning {url!r} into {str(path)!r}")
    try:
        pygit2.clone_repository(url, str(path))
    except pygit2.GitError as error:
        raise errors.SourceFetchError(url, str(error)) from error

    return path
