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

import textwrap

import pytest

MIT_LICENSE = textwrap.dedent(
    """\
    MIT License

    Copyright (c) 2020 Aloïs Micard

    Permission is hereby granted, free of charge, to any person obtaining a copy
    of this software and associated documentation files (the "Software"), to deal
    in the Software without restriction, including without limitation the rights
    to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
    copies of the Software, and to permit persons to whom the Software is
    furnished to do so, subject to the following conditions:

    The above copyright notice and this permission notice shall be included in all
    copies or substantial portions of the Software.

    THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
    IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
    FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
    AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
    LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
    OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
    SOFTWARE.
    """
)


@pytest.fixture
def mit_license():
    """Return the text of an MIT license file."""
    return MIT_LICENSE


@pytest.fixture
def source_path(tmp_path):
    """Return an empty source tree named 'my-project'."""
    path = tmp_path / "my-project"
    path.mkdir()
    return path


@pytest.fixture
def rust_project(source_path):
    """Return a fixture that can write a cargo project in source_path."""

    def write_project(
        *,
        package: bool = True,
        main: bool = True,
        bins=(),
        cargo_lock: str = "",
    ):
        cargo_toml = ""
        if package:
            cargo_toml = textwrap.dedent(
                """\
                [package]
                name = "osync"
                version = "0.3.1"
                description = "Synchronize files between two folders"
                license = "GPL-3.0"
                edition = "2018"

                [dependencies]
                clap = "2.33"
                """
            )
        else:
            cargo_toml = textwrap.dedent(
                """\
                [workspace]
                members = ["core", "cli"]
                """
            )
        (source_path / "Cargo.toml").write_text(cargo_toml)

        if cargo_lock:
            (source_path / "Cargo.lock").write_text(cargo_lock)

        (source_path / "src").mkdir(exist_ok=True)
        if main:
            (source_path / "src" / "main.rs").write_text("fn main() {}\n")

        if bins:
            (source_path / "src" / "bin").mkdir(exist_ok=True)
            for name in bins:
                (source_path / "src" / "bin" / name).write_text("fn main() {}\n")

        return source_path

    yield write_project


@pytest.fixture
def go_project(source_path):
    """Return a fixture that can write a go module project in source_path."""

    def write_project(*, go_mod: str = "", main_files=("main.go",)):
        if not go_mod:
            go_mod = textwrap.dedent(
                """\
                module example.org/foo

                go 1.14

                require github.com/spf13/cobra v1.0.0
                """
            )
        (source_path / "go.mod").write_text(go_mod)

        for main_file in main_files:
            path = source_path / main_file
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(
                textwrap.dedent(
                    """\
                    package main

                    import "fmt"

                    func main() {
                        fmt.Println("hello")
                    }
                    """
                )
            )

        return source_path

    yield write_project
