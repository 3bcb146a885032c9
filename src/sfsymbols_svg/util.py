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

"""Small helper functions."""

from fontTools import ttLib
from pathlib import Path
import regex


_DEFAULT_WEIGHT = "regular"


def safe_filename(name: str) -> str:
    # letters, digits and dots survive; ASCII only
    return regex.sub(r"[^A-Za-z0-9.]", "_", name).lower()


def svg_filename(name: str, weight: str) -> str:
    safe_name = safe_filename(name)
    if weight == _DEFAULT_WEIGHT:
        return f"{safe_name}.svg"
    return f"{safe_name}-{safe_filename(weight)}.svg"


def write_text(dest: Path, contents: str):
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(contents, encoding="utf-8")


def require_fully_loaded(font: ttLib.TTFont):
    not_loaded = sorted(t for t in font.keys() if not font.isLoaded(t))
    if not_loaded:
        raise ValueError(f"Everything should be loaded, following aren't: {not_loaded}")


def load_fully(font_file: Path) -> ttLib.TTFont:
    font = ttLib.TTFont(str(font_file), lazy=False)
    font.ensureDecompiled()  # Do what you thought lazy=False meant
    require_fully_loaded(font)
    return font
