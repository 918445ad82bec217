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

"""Classify license texts against a corpus of known licenses.

Texts are reduced to a multiset of word bigrams and compared with the
Sørensen-Dice coefficient. The corpus ships with the package as a gzipped
JSON document mapping SPDX identifiers to license texts, see
``tools/build_license_corpus.py``.
"""

import functools
import gzip
import importlib.resources
import json
import re
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple

from craft_cli import emit

CONFIDENCE_THRESHOLD = 0.9
"""Scores at or below this value are not trusted."""

LICENSE_FILES = ("LICENSE", "LICENSE.md", "COPYING")
"""License file names looked up at the source root, in order."""

_CORPUS_RESOURCE = ("data", "licenses.json.gz")

_COPYRIGHT_LINE = re.compile(
    r"^[ \t]*(?:copyright[ \t]*(?:\(c\)|©|\d|<|\[)|\(c\)|©).*$",
    re.IGNORECASE | re.MULTILINE,
)
_WORD_SEPARATOR = re.compile(r"[^a-z0-9]+")


def normalize(text: str) -> List[str]:
    """Reduce a license text to its sequence of lowercase words.

    Copyright statements are dropped since they differ for every project.
    """
    text = _COPYRIGHT_LINE.sub("", text).lower()
    return _WORD_SEPARATOR.sub(" ", text).split()


@dataclass(frozen=True)
class _Fingerprint:
    bigrams: Counter
    size: int

    @classmethod
    def from_text(cls, text: str) -> "_Fingerprint":
        words = normalize(text)
        bigrams: Counter = Counter(zip(words, words[1:]))
        return cls(bigrams=bigrams, size=sum(bigrams.values()))

    def dice(self, other: "_Fingerprint") -> float:
        if not self.size or not other.size:
            return 0.0
        common = sum((self.bigrams & other.bigrams).values())
        return 2 * common / (self.size + other.size)


@dataclass(frozen=True)
class Match:
    """The best corpus match for a text."""

    license: str
    """SPDX identifier of the matched license."""

    score: float
    """Similarity between 0 (nothing in common) and 1 (identical)."""

    @property
    def is_confident(self) -> bool:
        """Whether the match is good enough to be trusted."""
        return self.score > CONFIDENCE_THRESHOLD


class Store:
    """An immutable corpus of license fingerprints.

    :param texts: mapping of SPDX identifiers to license texts.
    """

    def __init__(self, texts: Mapping[str, str]) -> None:
        self._fingerprints: Tuple[Tuple[str, _Fingerprint], ...] = tuple(
            (license_id, _Fingerprint.from_text(text))
            for license_id, text in sorted(texts.items())
        )

    @classmethod
    def from_resource(cls) -> "Store":
        """Load the corpus embedded in the package."""
        resource = importlib.resources.files(__package__)
        for part in _CORPUS_RESOURCE:
            resource = resource / part
        corpus: Dict[str, Dict[str, str]] = json.loads(
            gzip.decompress(resource.read_bytes())
        )
        return cls(corpus["licenses"])

    @property
    def licenses(self) -> List[str]:
        """SPDX identifiers known to the store, sorted."""
        return [license_id for license_id, _ in self._fingerprints]

    def __len__(self) -> int:
        return len(self._fingerprints)

    def analyze(self, text: str) -> Match:
        """Find the corpus license closest to text.

        :param text: the candidate license text.
        :returns: the best match; ties go to the first identifier in sort order.
        """
        candidate = _Fingerprint.from_text(text)
        best = Match(license="", score=0.0)
        for license_id, fingerprint in self._fingerprints:
            score = candidate.dice(fingerprint)
            if score > best.score:
                best = Match(license=license_id, score=score)
        return best


@functools.lru_cache(maxsize=None)
def get_store() -> Store:
    """Return the process wide license store, loading it on first use."""
    store = Store.from_resource()
    emit.debug(f"Loaded {len(store)} licenses from the embedded corpus")
    return store


def find_license_file(source_path: Path) -> Optional[Path]:
    """Return the first conventional license file at the root of source_path."""
    for file_name in LICENSE_FILES:
        license_file = source_path / file_name
        if license_file.is_file():
            return license_file
    return None


def detect_license(source_path: Path, *, store: Optional[Store] = None) -> Optional[str]:
    """Identify the license of the project at source_path.

    :param source_path: root of the source tree.
    :param store: the corpus to compare against, the embedded one by default.
    :returns: the SPDX identifier, or None if there is no license file or the
        best match is not confident enough.
    """
    license_file = find_license_file(source_path)
    if license_file is None:
        emit.debug("No license file found")
        return None

    text = license_file.read_text(encoding="utf-8", errors="replace")
    if store is None:
        store = get_store()
    match = store.analyze(text)
    emit.debug(
        f"{license_file.name!r} best matches {match.license or 'nothing'!r} "
        f"with a score of {match.score:.3f}"
    )

    if not match.is_confident:
        return None

    return match.license
