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

import subprocess

import pytest

from autosnap import errors
from autosnap.generators import python
from autosnap.models import App, Part


@pytest.fixture
def mock_which(mocker):
    yield mocker.patch(
        "autosnap.generators.python.shutil.which", return_value="/usr/bin/python3"
    )


@pytest.fixture
def generator(source_path, mock_which):
    (source_path / "setup.py").write_text("from setuptools import setup\nsetup()\n")
    yield python.PythonProvider.provide(source_path, "my-project")


def test_provide_without_interpreter(source_path, mock_which):
    mock_which.return_value = None

    with pytest.raises(errors.InterpreterNotFound):
        python.PythonProvider.provide(source_path, "my-project")

    mock_which.assert_called_once_with("python3")


@pytest.mark.parametrize(
    "method,flag",
    [("name", "--name"), ("version", "--version"), ("summary", "--description")],
)
def test_metadata(generator, fake_process, method, flag):
    fake_process.register_subprocess(["python3", "setup.py", flag], stdout="value\n")

    assert getattr(generator, method)() == "value"


def test_metadata_uses_last_line(generator, fake_process):
    fake_process.register_subprocess(
        ["python3", "setup.py", "--version"],
        stdout=["running egg_info", "warning: no files found", "  1.2.3  "],
    )

    assert generator.version() == "1.2.3"


def test_metadata_empty_output(generator, fake_process):
    fake_process.register_subprocess(["python3", "setup.py", "--name"], stdout="")

    assert generator.name() is None


def test_metadata_script_fails(generator, fake_process, emitter):
    fake_process.register_subprocess(
        ["python3", "setup.py", "--name"], stderr="Traceback", returncode=1
    )

    assert generator.name() is None
    emitter.assert_debug("'python3 setup.py --name' failed with exit code 1: Traceback")


def test_metadata_undecodable_output(generator, fake_process):
    fake_process.register_subprocess(
        ["python3", "setup.py", "--name"], stdout=b"caf\xe9\n"
    )

    assert generator.name() is None


def test_metadata_decode_error_is_logged(generator, mocker, emitter):
    mocker.patch(
        "autosnap.generators.python.subprocess.run",
        side_effect=UnicodeDecodeError("utf-8", b"caf\xe9", 3, 4, "invalid byte"),
    )

    assert generator.version() is None
    emitter.assert_debug(
        "'python3 setup.py --version' printed undecodable output: "
        "'utf-8' codec can't decode byte 0xe9 in position 3: invalid byte"
    )


def test_metadata_interpreter_cannot_run(generator, mocker):
    mocker.patch(
        "autosnap.generators.python.subprocess.run",
        side_effect=FileNotFoundError(2, "No such file or directory"),
    )

    with pytest.raises(errors.GeneratorSubprocessError) as raised:
        generator.name()

    assert raised.value.command == ["python3", "setup.py", "--name"]


def test_query_runs_in_source_path(generator, source_path, mocker):
    run = mocker.patch(
        "autosnap.generators.python.subprocess.run",
        return_value=subprocess.CompletedProcess([], 0, stdout="foo\n", stderr=""),
    )

    assert generator.name() == "foo"
    run.assert_called_once_with(
        ["python3", "setup.py", "--name"],
        cwd=source_path,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        check=True,
        text=True,
    )


def test_description_and_license(generator):
    assert generator.description() is None
    assert generator.license() is None


def test_parts(generator):
    assert generator.parts() == {
        "my-project": Part(plugin="python", python_version="python3")
    }


def test_apps(generator, emitter):
    assert generator.apps() == {"my-project": App(command="TODO")}
    emitter.assert_progress(
        "Could not determine the command of app 'my-project', "
        "replace the 'TODO' placeholder in snapcraft.yaml.",
        permanent=True,
    )
