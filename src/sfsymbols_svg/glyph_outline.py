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

"""Reads glyph outlines out of a font as svg paths."""

from absl import logging
from fontTools import ttLib
from fontTools.pens.basePen import DecomposingPen
from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.teePen import TeePen
from fontTools.pens.transformPen import TransformPen
import pathops
from picosvg.geometric_types import Rect
from picosvg.svg_transform import Affine2D
from picosvg.svg_types import SVGPath
from typing import Any, Mapping, NamedTuple, Optional


class GlyphOutline(NamedTuple):
    # +y down, baseline at y=0, units are those of the rendering size
    bounds: Rect
    path: SVGPath


class SVGPathPen(DecomposingPen):
    """A FontTools Pen that draws onto a picosvg SVGPath.

    Components are decomposed using `glyphSet`; a missing reference raises KeyError.
    """

    skipMissingComponents = False

    def __init__(self, glyphSet: Optional[Mapping[str, Any]] = None):
        DecomposingPen.__init__(self, glyphSet or {})
        self.path = SVGPath()

    def moveTo(self, pt):
        self.path.M(*pt)

    def lineTo(self, pt):
        self.path.L(*pt)

    def curveTo(self, *points):
        self.path.C(*(v for pt in points for v in pt))

    def qCurveTo(self, *points):
        # TrueType quadratic splines have implied on-curve points
        for (control_pt, end_pt) in pathops.decompose_quadratic_segment(points):
            self.path.Q(*control_pt, *end_pt)

    def closePath(self):
        self.path.end()

    def endPath(self):
        pass


def font_to_canvas(units_per_em: int, font_size: float) -> Affine2D:
    """Maps font units (+y up) to font_size pixels per em (+y down)."""
    scale = font_size / units_per_em
    return Affine2D(scale, 0, 0, -scale, 0, 0)


def draw_outline(
    glyph, glyph_set: Mapping[str, Any], transform: Affine2D
) -> Optional[GlyphOutline]:
    svg_pen = SVGPathPen(glyph_set)
    bounds_pen = BoundsPen(glyph_set)
    glyph.draw(TransformPen(TeePen(svg_pen, bounds_pen), transform))

    if bounds_pen.bounds is None:
        return None
    x_min, y_min, x_max, y_max = bounds_pen.bounds
    return GlyphOutline(
        Rect(x_min, y_min, x_max - x_min, y_max - y_min),
        svg_pen.path,
    )


def glyph_name_for_char(font: ttLib.TTFont, char: str) -> Optional[str]:
    cmap = font.getBestCmap()
    if not cmap or not char:
        return None
    return cmap.get(ord(char[0]))


def glyph_outline(
    font: ttLib.TTFont, char: str, font_size: float
) -> Optional[GlyphOutline]:
    """Draw the glyph for char at font_size.

    Returns None if the font has no glyph for char or the glyph has no geometry.
    """
    glyph_name = glyph_name_for_char(font, char)
    if glyph_name is None:
        logging.debug("No glyph for U+%04X", ord(char[0]) if char else 0)
        return None

    glyph_set = font.getGlyphSet()
    transform = font_to_canvas(font["head"].unitsPerEm, font_size)
    outline = draw_outline(glyph_set[glyph_name], glyph_set, transform)
    if outline is None:
        logging.debug("%s has no outline", glyph_name)
    return outline
