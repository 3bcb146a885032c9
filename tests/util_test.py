# Copyright 2022 Google LLC
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

from sfsymbols_svg.util import load_fully, safe_filename, svg_filename, write_text
import pytest
from test_helper import PUA_B, make_test_font, mkdtemp


@pytest.mark.parametrize(
    "name, expected",
    [
        ("moon.stars", "moon.stars"),
        ("Moon.Stars", "moon.stars"),
        ("Moon Stars", "moon_stars"),
        ("arrow.up/arrow.down", "arrow.up_arrow.down"),
        ("café", "caf_"),
        ("a+b-c", "a_b_c"),
        ("0.circle", "0.circle"),
    ],
)
def test_safe_filename(name, expected):
    assert safe_filename(name) == expected


@pytest.mark.parametrize(
    "name, weight, expected",
    [
        ("Moon.Stars", "regular", "moon.stars.svg"),
        ("Moon.Stars", "bold", "moon.stars-bold.svg"),
        ("Moon Stars", "regular", "moon_stars.svg"),
        ("Moon Stars", "bold", "moon_stars-bold.svg"),
        ("heart", "ultraLight", "heart-ultralight.svg"),
    ],
)
def test_svg_filename(name, weight, expected):
    assert svg_filename(name, weight) == expected


def test_write_text_creates_parents():
    dest = mkdtemp() / "a" / "b" / "c.svg"
    write_text(dest, "<svg/>")
    assert dest.read_text() == "<svg/>"


def test_load_fully():
    font_file = make_test_font(mkdtemp() / "Test.otf", {PUA_B: [(0, 0, 10, 10)]})
    font = load_fully(font_file)
    assert all(font.isLoaded(t) for t in font.keys())
    assert font.getBestCmap()[PUA_B] == "u100000"
