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

"""Finds and loads one font per weight."""

from absl import logging
from concurrent.futures import ThreadPoolExecutor
from fontTools import ttLib
from pathlib import Path
from sfsymbols_svg import util
from typing import NamedTuple, Optional, Sequence, Tuple


class WeightedFont(NamedTuple):
    weight: str
    font: ttLib.TTFont


def font_filename(weight: str) -> str:
    return f"SF-Pro-Text-{weight[:1].upper()}{weight[1:]}.otf"


def find_font_file(fonts_dir: Path, weight: str) -> Optional[Path]:
    font_file = fonts_dir / font_filename(weight)
    if font_file.is_file():
        return font_file
    return None


def _load(fonts_dir: Path, weight: str) -> Optional[WeightedFont]:
    font_file = find_font_file(fonts_dir, weight)
    if font_file is None:
        logging.error(
            "Font file for weight '%s' not found in %s. Please make sure %s is "
            "installed in the specified fonts directory.",
            weight,
            fonts_dir,
            font_filename(weight),
        )
        return None

    logging.info("Loading font: %s", font_file)
    try:
        return WeightedFont(weight, util.load_fully(font_file))
    except (OSError, ValueError, ttLib.TTLibError) as e:
        logging.error("Error loading font weight %s: %s", weight, e)
        return None


def load_fonts(fonts_dir: Path, weights: Sequence[str]) -> Tuple[WeightedFont, ...]:
    """Load the font for each weight concurrently, dropping the ones that fail.

    Raises ValueError if no font could be loaded.
    """
    with ThreadPoolExecutor(max_workers=max(1, len(weights))) as executor:
        results = executor.map(lambda weight: _load(fonts_dir, weight), weights)
        fonts = tuple(f for f in results if f is not None)

    if not fonts:
        raise ValueError(
            f"No valid fonts were loaded from {fonts_dir}. Please check the weights "
            "and font files."
        )
    return fonts
