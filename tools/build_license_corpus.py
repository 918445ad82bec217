#!/usr/bin/env python3
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

"""Regenerate autosnap/licenses/data/licenses.json.gz.

Texts come from tools/license-texts/<SPDX id>.txt and from the Debian
common-licenses directory, which ships the long licenses verbatim.
"""

import argparse
import gzip
import json
import pathlib
import sys

_ROOT = pathlib.Path(__file__).parent.parent
_TEXTS_DIR = _ROOT / "tools" / "license-texts"
_OUTPUT = _ROOT / "autosnap" / "licenses" / "data" / "licenses.json.gz"

# file name in common-licenses -> SPDX identifier
COMMON_LICENSES = {
    "Apache-2.0": "Apache-2.0",
    "Artistic": "Artistic-1.0-Perl",
    "CC0-1.0": "CC0-1.0",
    "GFDL-1.2": "GFDL-1.2-only",
    "GFDL-1.3": "GFDL-1.3-only",
    "GPL-1": "GPL-1.0-only",
    "GPL-2": "GPL-2.0-only",
    "GPL-3": "GPL-3.0-only",
    "LGPL-2": "LGPL-2.0-only",
    "LGPL-2.1": "LGPL-2.1-only",
    "LGPL-3": "LGPL-3.0-only",
    "MPL-1.1": "MPL-1.1",
    "MPL-2.0": "MPL-2.0",
}


def collect(common_licenses_dir: pathlib.Path) -> dict:
    licenses = {}
    for file_name, spdx_id in COMMON_LICENSES.items():
        licenses[spdx_id] = (common_licenses_dir / file_name).read_text()

    for text_file in sorted(_TEXTS_DIR.glob("*.txt")):
        licenses[text_file.stem] = text_file.read_text()

    return dict(sorted(licenses.items()))


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--common-licenses",
        type=pathlib.Path,
        default=pathlib.Path("/usr/share/common-licenses"),
    )
    parser.add_argument("--output", type=pathlib.Path, default=_OUTPUT)
    args = parser.parse_args()

    corpus = {"version": 1, "licenses": collect(args.common_licenses)}
    data = json.dumps(corpus, separators=(",", ":"), sort_keys=True).encode()
    args.output.write_bytes(gzip.compress(data, compresslevel=9, mtime=0))
    print(f"Wrote {len(corpus['licenses'])} licenses to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
