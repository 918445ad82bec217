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

import pygit2
import pytest

from autosnap import errors, sources


@pytest.mark.parametrize(
    "source,remote",
    [
        ("https://github.com/creekorful/osync", True),
        ("https://github.com/creekorful/osync.git", True),
        ("git://example.org/foo.git", True),
        ("ssh://git@example.org/foo.git", True),
        ("git@github.com:creekorful/osync.git", True),
        ("file:///home/user/osync", False),
        ("/home/user/osync", False),
        ("osync", False),
        ("../osync", False),
        ("C:\\Users\\user\\osync", False),
    ],
)
def test_is_remote(source, remote):
    assert sources.is_remote(source) is remote


@pytest.mark.parametrize(
    "source,name",
    [
        ("https://github.com/creekorful/osync", "osync"),
        ("https://github.com/creekorful/osync.git", "osync"),
        ("https://github.com/creekorful/osync/", "osync"),
        ("git@github.com:creekorful/osync.git", "osync"),
        ("git@example.org:osync.git", "osync"),
        ("https://example.org", ""),
    ],
)
def test_get_source_name(source, name):
    assert sources.get_source_name(source) == name


@pytest.fixture
def mock_clone(mocker):
    yield mocker.patch("autosnap.sources.pygit2.clone_repository")


def test_fetch_source(tmp_path, mock_clone):
    path = sources.fetch_source("https://github.com/creekorful/osync.git", tmp_path)

    assert path == tmp_path / "osync"
    mock_clone.assert_called_once_with(
        "https://github.com/creekorful/osync.git", str(tmp_path / "osync")
    )


def test_fetch_source_no_name(tmp_path, mock_clone):
    with pytest.raises(errors.SourceFetchError):
        sources.fetch_source("https://example.org", tmp_path)

    mock_clone.assert_not_called()


def test_fetch_source_destination_exists(tmp_path, mock_clone):
    (tmp_path / "osync").mkdir()

    with pytest.raises(errors.SourceFetchError) as raised:
        sources.fetch_source("https://github.com/creekorful/osync", tmp_path)

    assert "already exists" in str(raised.value)
    mock_clone.assert_not_called()


def test_fetch_source_clone_error(tmp_path, mock_clone):
    mock_clone.side_effect = pygit2.GitError("repository not found")

    with pytest.raises(errors.SourceFetchError) as raised:
        sources.fetch_source("https://github.com/creekorful/nothing", tmp_path)

    assert str(raised.value) == (
        "Failed to fetch 'https://github.com/creekorful/nothing': "
        "repository not found"
    )
