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

"""Fits a glyph bounding box into a square canvas.

The glyph is scaled uniformly so that its limiting dimension, the one that is
relatively larger compared to the space available once padding is removed, exactly
spans the padded area. It is then centered in the whole canvas. Aspect ratio is always
preserved and the glyph never overflows the padded area on either axis.
"""

from picosvg.geometric_types import Rect
from picosvg.svg_transform import Affine2D
from typing import NamedTuple, Optional


class FitOptions(NamedTuple):
    canvas_size: float = 24
    padding: float = 2

    @property
    def available_size(self) -> float:
        return self.canvas_size - self.padding * 2


def compute_fit(bbox: Optional[Rect], options: FitOptions) -> Optional[Affine2D]:
    """Compute the transform mapping bbox into the canvas described by options.

    Args:
        bbox: the glyph bounds in glyph space; x, y are the minimum coordinates.
        options: canvas size and padding.

    Returns:
        Affine2D(scale, 0, 0, scale, dx, dy), or None when the glyph has no
        renderable geometry (no bounds, zero width or zero height) or the padding
        leaves no room to draw in.
    """
    if bbox is None:
        return None
    symbol_width = bbox.w
    symbol_height = bbox.h
    if symbol_width == 0 or symbol_height == 0:
        return None

    if options.available_size <= 0:
        return None

    available_width = available_height = options.available_size

    if symbol_width / available_width > symbol_height / available_height:
        scale = available_width / symbol_width
    else:
        scale = available_height / symbol_height

    scaled_width = symbol_width * scale
    scaled_height = symbol_height * scale

    # glyph space doesn't start at 0,0 so shift by the scaled bbox origin too
    dx = (options.canvas_size - scaled_width) / 2 - bbox.x * scale
    dy = (options.canvas_size - scaled_height) / 2 - bbox.y * scale

    return Affine2D(scale, 0, 0, scale, dx, dy)
