# Copyright 2020 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Locates the symbol data files for a version.

The sources directory holds one subdirectory per version, e.g.

    sources/
        5.0/symbols.txt
        5.0/names.txt
        6.0/symbols.txt
        6.0/names.txt
"""

import functools
import itertools
from pathlib import Path
from typing import NamedTuple, Optional, Tuple


_SYMBOLS_FILE = "symbols.txt"
_NAMES_FILE = "names.txt"


class DataFiles(NamedTuple):
    symbols: Path
    names: Path


def _version_part(part: str) -> int:
    try:
        return int(part)
    except ValueError:
        return 0


def _newest_first(a: str, b: str) -> int:
    parts_a = (_version_part(p) for p in a.split("."))
    parts_b = (_version_part(p) for p in b.split("."))
    for part_a, part_b in itertools.zip_longest(parts_a, parts_b, fillvalue=0):
        if part_a != part_b:
            return part_b - part_a
    return 0


def detect_versions(sources_dir: Path) -> Tuple[str, ...]:
    """Version directory names in sources_dir, newest first."""
    if not sources_dir.is_dir():
        raise ValueError(
            f"No symbol versions detected in {sources_dir}, it is not a directory. "
            f"Please provide a sources directory containing version folders with "
            f"{_SYMBOLS_FILE} and {_NAMES_FILE} files."
        )
    versions = [
        p.name
        for p in sources_dir.iterdir()
        if p.is_dir() and not p.name.startswith(".")
    ]
    if not versions:
        raise ValueError(
            f"No symbol versions detected in {sources_dir}. Please add at least one "
            f"version folder containing {_SYMBOLS_FILE} and {_NAMES_FILE} files."
        )
    return tuple(sorted(versions, key=functools.cmp_to_key(_newest_first)))


def data_files(sources_dir: Path, version: str) -> DataFiles:
    return DataFiles(
        sources_dir / version / _SYMBOLS_FILE,
        sources_dir / version / _NAMES_FILE,
    )


def resolve(sources_dir: Path, version: Optional[str] = None) -> Tuple[str, DataFiles]:
    """Pick a version (the newest if none is given) and check its data files exist."""
    versions = detect_versions(sources_dir)
    if not version:
        version = versions[0]

    if not (sources_dir / version).is_dir():
        raise FileNotFoundError(
            f"Symbols version '{version}' not found in {sources_dir}. Available: "
            f"{', '.join(versions)}. Please make sure the directory exists and "
            "contains the required data files."
        )

    files = data_files(sources_dir, version)
    for data_file in files:
        if not data_file.is_file():
            raise FileNotFoundError(
                f"{data_file.name} for symbols {version} is missing: expected "
                f"{data_file}"
            )
    return version, files
