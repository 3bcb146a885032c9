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

"""Builds the svg document for a single symbol."""

from absl import logging
from fontTools import ttLib
from lxml import etree
from picosvg.svg_meta import ntos
from picosvg.svg_transform import Affine2D
from sfsymbols_svg.fit import FitOptions, compute_fit
from sfsymbols_svg.glyph_outline import glyph_outline
from sfsymbols_svg.util import svg_filename
from typing import NamedTuple, Optional


_SVG_NS = "http://www.w3.org/2000/svg"
_SYMBOL_SVG_TEMPLATE = (
    f'<svg xmlns="{_SVG_NS}" viewBox="TBD" width="TBD" height="TBD"/>'
)
_DEFAULT_PATH_PRECISION = 2


def _svg_matrix(transform: Affine2D) -> str:
    return f"matrix({', '.join(ntos(float(v)) for v in transform)})"


def symbol_svg(
    canvas_size: float, title: str, transform: Affine2D, path_data: str
) -> str:
    size = ntos(float(canvas_size))
    svg_root = etree.fromstring(_SYMBOL_SVG_TEMPLATE)
    svg_root.attrib["viewBox"] = f"0 0 {size} {size}"
    svg_root.attrib["width"] = size
    svg_root.attrib["height"] = size

    svg_title = etree.SubElement(svg_root, f"{{{_SVG_NS}}}title")
    svg_title.text = title

    svg_path = etree.SubElement(svg_root, f"{{{_SVG_NS}}}path")
    svg_path.attrib["transform"] = _svg_matrix(transform)
    svg_path.attrib["d"] = path_data
    svg_path.attrib["fill"] = "currentColor"

    return etree.tostring(svg_root, encoding=str, pretty_print=True)


class RenderedSymbol(NamedTuple):
    name: str
    weight: str
    canvas_size: float
    transform: Affine2D
    path_data: str

    def filename(self) -> str:
        return svg_filename(self.name, self.weight)

    def tostring(self) -> str:
        return symbol_svg(self.canvas_size, self.name, self.transform, self.path_data)


def render_symbol(
    font: ttLib.TTFont,
    weight: str,
    name: str,
    char: str,
    options: FitOptions,
    path_precision: int = _DEFAULT_PATH_PRECISION,
) -> Optional[RenderedSymbol]:
    """Render char from font as a symbol fitted to the canvas in options.

    The glyph is drawn at canvas_size pixels per em; the fit is computed from the
    unrounded outline, only the emitted path coordinates are rounded.

    Returns None if there's nothing to render.
    """
    outline = glyph_outline(font, char, options.canvas_size)
    if outline is None:
        return None

    transform = compute_fit(outline.bounds, options)
    if transform is None:
        logging.debug("%s (%s) has an empty bounding box", name, weight)
        return None

    path_data = outline.path.round_floats(path_precision).d
    if not path_data:
        return None

    return RenderedSymbol(name, weight, options.canvas_size, transform, path_data)
