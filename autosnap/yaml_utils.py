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

from typing import Any, Dict, Optional, TextIO

import yaml

try:
    # The C-based dumper isn't available everywhere, but it's much faster.
    # The pure Python dumper formats some scalars differently, so raise an error
    # instead of falling back to it.
    from yaml import CSafeDumper  # type: ignore
except ImportError:
    raise RuntimeError("autosnap requires PyYAML to be built with libyaml bindings")


def dump(data: Dict[str, Any], *, stream: Optional[TextIO] = None) -> Optional[str]:
    """Safely dump YAML keeping the insertion order of mappings."""
    return yaml.dump(
        data,
        stream,
        _SafeOrderedDumper,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
        width=1000,
    )


class _SafeOrderedDumper(CSafeDumper):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.add_representer(str, _str_presenter)


def _str_presenter(dumper, data):
    if len(data.splitlines()) > 1:  # check for multiline string
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)
