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

"""Generator for Python projects using a setup.py."""

import shutil
import subprocess
from pathlib import Path
from typing import Dict, List, Optional

from craft_cli import emit
from overrides import overrides

from autosnap import const, errors
from autosnap.models import App, Part

from ._base import Generator, Provider

SETUP_PY = "setup.py"

PYTHON_INTERPRETER = "python3"

PYTHON_VERSION = "python3"
"""The python-version set on generated parts."""


class PythonGenerator(Generator):
    """Generate snaps for setup.py projects.

    Metadata is queried by running the setup script, one call per field.
    """

    ecosystem = "python"

    def _query_setup(self, flag: str) -> Optional[str]:
        """Run ``setup.py <flag>`` and return the last line it prints.

        :returns: the value, or None if the script fails, prints nothing or
            prints output that cannot be decoded.
        :raises GeneratorSubprocessError: if the interpreter cannot be run.
        """
        cmd: List[str] = [PYTHON_INTERPRETER, SETUP_PY, flag]
        try:
            proc = subprocess.run(
                cmd,
                cwd=self.source_path,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=True,
                text=True,
            )
        except subprocess.CalledProcessError as error:
            emit.debug(
                f"{' '.join(cmd)!r} failed with exit code {error.returncode}: "
                f"{(error.stderr or '').strip()}"
            )
            return None
        except UnicodeDecodeError as error:
            emit.debug(f"{' '.join(cmd)!r} printed undecodable output: {error}")
            return None
        except OSError as error:
            raise errors.GeneratorSubprocessError(cmd, str(error)) from error

        lines = (proc.stdout or "").strip().splitlines()
        if not lines:
            return None

        value = lines[-1].strip()
        emit.debug(f"Using {value!r} from {' '.join(cmd)!r}")
        return value

    @overrides
    def name(self) -> Optional[str]:
        return self._query_setup("--name")

    @overrides
    def version(self) -> Optional[str]:
        return self._query_setup("--version")

    @overrides
    def summary(self) -> Optional[str]:
        return self._query_setup("--description")

    @overrides
    def parts(self) -> Dict[str, Part]:
        return {
            self.source_name: Part(plugin="python", python_version=PYTHON_VERSION)
        }

    @overrides
    def apps(self) -> Dict[str, App]:
        # TODO resolve the command from the console_scripts entry points
        emit.progress(
            f"Could not determine the command of app {self.source_name!r}, "
            f"replace the {const.PLACEHOLDER!r} placeholder in snapcraft.yaml.",
            permanent=True,
        )
        return {self.source_name: App(command=const.PLACEHOLDER)}


class PythonProvider(Provider):
    """Provide generators for trees with a setup.py."""

    ecosystem = "python"
    markers = (SETUP_PY,)

    @classmethod
    def provide(cls, source_path: Path, source_name: str) -> PythonGenerator:
        if shutil.which(PYTHON_INTERPRETER) is None:
            raise errors.InterpreterNotFound(PYTHON_INTERPRETER)

        return PythonGenerator(source_path=source_path, source_name=source_name)
