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

from picosvg.geometric_types import Rect
from picosvg.svg_transform import Affine2D
from sfsymbols_svg.glyph_outline import (
    SVGPathPen,
    draw_outline,
    font_to_canvas,
    glyph_name_for_char,
    glyph_outline,
)
import pytest
from test_helper import PUA_B


class SquareGlyph:
    def draw(self, pen):
        pen.moveTo((0, 0))
        pen.lineTo((0, 10))
        pen.lineTo((10, 10))
        pen.lineTo((10, 0))
        pen.closePath()


class ArchGlyph:
    def draw(self, pen):
        pen.moveTo((0, 0))
        pen.curveTo((0, 10), (10, 10), (10, 0))
        pen.closePath()


class EmptyGlyph:
    def draw(self, pen):
        pass


class CompositeGlyph:
    def draw(self, pen):
        pen.addComponent("square", (1, 0, 0, 1, 20, 0))


def test_font_to_canvas():
    assert font_to_canvas(1000, 500) == Affine2D(0.5, 0, 0, -0.5, 0, 0)
    assert font_to_canvas(2048, 24) == Affine2D(24 / 2048, 0, 0, -24 / 2048, 0, 0)


def test_draw_outline_flips_y():
    outline = draw_outline(SquareGlyph(), {}, Affine2D(2, 0, 0, -2, 0, 0))

    assert outline.path.d == "M0,0 L0,-20 L20,-20 L20,0 Z"
    assert outline.bounds == Rect(0, -20, 20, 20)


def test_draw_outline_tight_bounds():
    # the control box would reach -10, the curve itself only gets to -7.5
    outline = draw_outline(ArchGlyph(), {}, Affine2D(1, 0, 0, -1, 0, 0))

    assert outline.bounds.y == pytest.approx(-7.5)
    assert outline.bounds.h == pytest.approx(7.5)
    assert outline.bounds.w == pytest.approx(10)


def test_draw_outline_nothing_to_draw():
    assert draw_outline(EmptyGlyph(), {}, Affine2D.identity()) is None


def test_draw_outline_decomposes_components():
    outline = draw_outline(
        CompositeGlyph(), {"square": SquareGlyph()}, Affine2D(1, 0, 0, -1, 0, 0)
    )

    assert outline.path.d == "M20,0 L20,-10 L30,-10 L30,0 Z"
    assert outline.bounds == Rect(20, -10, 10, 10)


def test_missing_component():
    with pytest.raises(KeyError):
        draw_outline(CompositeGlyph(), {}, Affine2D.identity())


def test_qcurve_implied_on_curve_points():
    pen = SVGPathPen()
    pen.moveTo((0, -5))
    pen.qCurveTo((0, -8), (3, -10), (7, -10), (10, -8), (10, -5))
    pen.endPath()

    assert pen.path.d == (
        "M0,-5 Q0,-8 1.5,-9 Q3,-10 5,-10 Q7,-10 8.5,-9 Q10,-8 10,-5"
    )


def test_glyph_name_for_char(regular_font):
    assert glyph_name_for_char(regular_font, chr(PUA_B)) == "u100000"
    assert glyph_name_for_char(regular_font, chr(PUA_B + 42)) is None
    assert glyph_name_for_char(regular_font, "") is None


def test_glyph_outline_at_font_size(regular_font):
    # box is 100,0 900,400 in a 1000 upem font
    outline = glyph_outline(regular_font, chr(PUA_B), 24)

    assert outline.bounds.x == pytest.approx(2.4)
    assert outline.bounds.y == pytest.approx(-9.6)
    assert outline.bounds.w == pytest.approx(19.2)
    assert outline.bounds.h == pytest.approx(9.6)
    assert outline.path.d.startswith("M")


@pytest.mark.parametrize(
    "codepoint",
    [
        # not in cmap
        PUA_B + 42,
        # in cmap, no contours
        PUA_B + 2,
    ],
)
def test_glyph_outline_none(regular_font, codepoint):
    assert glyph_outline(regular_font, chr(codepoint), 24) is None
