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

from absl import flags
from absl import logging
import importlib.resources as resources
from pathlib import Path
from sfsymbols_svg.fit import FitOptions
import toml
from typing import Any, MutableMapping, NamedTuple, Optional, Tuple


FLAGS = flags.FLAGS


_DEFAULT_CONFIG_FILE = "_default.toml"
_ALL_WEIGHTS = "all"
FONT_WEIGHTS = (
    "thin",
    "ultraLight",
    "light",
    "regular",
    "medium",
    "semibold",
    "bold",
    "heavy",
    "black",
)


# we use None as a sentinel for flag not set; SymbolConfig class has the actual defaults.
# CLI flags override config file (which overrides default SymbolConfig).
flags.DEFINE_float(
    "canvas_size", None, "Width and height of the output svgs.", short_name="s"
)
flags.DEFINE_float(
    "padding", None, "Space kept clear around the symbol.", short_name="p"
)
flags.DEFINE_multi_string(
    "weight",
    None,
    "Font weights to include, repeat for more than one. 'all' means "
    + ", ".join(FONT_WEIGHTS)
    + ".",
    short_name="w",
)
flags.DEFINE_string("output_dir", None, "Output directory.", short_name="o")
flags.DEFINE_string(
    "fonts_dir",
    None,
    "Directory containing the SF Pro Text fonts.",
    short_name="f",
)
flags.DEFINE_string("sf_version", None, "Symbols version to use, the latest if unset.")
flags.DEFINE_string(
    "sources_dir",
    None,
    "Directory containing one folder per version, each with symbols.txt and "
    "names.txt.",
)
flags.DEFINE_string(
    "icons_list",
    None,
    "File listing the icons to process, one name per line. All icons if unset.",
)
flags.DEFINE_integer(
    "path_precision",
    None,
    "Number of decimals kept in path coordinates.",
    lower_bound=0,
)


class SymbolConfig(NamedTuple):
    canvas_size: float = 24
    padding: float = 2
    weights: Tuple[str, ...] = ("regular",)
    output_dir: str = "sf-symbols-svgs"
    fonts_dir: str = "/Library/Fonts"
    sf_version: str = ""
    sources_dir: str = "sources"
    icons_list: Optional[str] = None
    path_precision: int = 2

    @property
    def fit_options(self) -> FitOptions:
        return FitOptions(self.canvas_size, self.padding)

    def validate(self):
        if self.canvas_size <= 0:
            raise ValueError("'canvas_size' must be positive")
        if self.padding < 0:
            raise ValueError("'padding' must be zero or positive")
        if self.padding * 2 >= self.canvas_size:
            raise ValueError("'padding' must be less than half of 'canvas_size'")
        if self.path_precision < 0:
            raise ValueError("'path_precision' must be zero or positive")
        if not self.weights:
            raise ValueError("Must have at least one weight")
        return self


def _resolve_config(config_file: Optional[Path] = None) -> MutableMapping[str, Any]:
    if config_file is None:
        default_config = resources.files("sfsymbols_svg.data") / _DEFAULT_CONFIG_FILE
        return toml.loads(default_config.read_text(encoding="utf-8"))
    return toml.load(config_file)


_DEFAULT_CONFIG = SymbolConfig()


def _pop_flag(
    config: MutableMapping[str, Any], name: str, flag_name: Optional[str] = None
) -> Any:
    config_value = config.pop(name, None)
    flag_value = getattr(FLAGS, flag_name or name)
    if flag_value == []:  # unset multi flag
        flag_value = None
    if config_value is None and flag_value is None:
        return getattr(_DEFAULT_CONFIG, name)
    return flag_value if flag_value is not None else config_value


def _expand_weights(weights) -> Tuple[str, ...]:
    if isinstance(weights, str):
        weights = (weights,)
    weights = tuple(weights)
    if len(weights) == 1 and weights[0].lower() == _ALL_WEIGHTS:
        logging.info("Using all available weights: %s", ", ".join(FONT_WEIGHTS))
        return FONT_WEIGHTS
    return weights


def load(config_file: Optional[Path] = None) -> SymbolConfig:
    config = _resolve_config(config_file)

    # CLI flags will take precedence over the config file
    canvas_size = float(_pop_flag(config, "canvas_size"))
    padding = float(_pop_flag(config, "padding"))
    weights = _expand_weights(_pop_flag(config, "weights", "weight"))
    output_dir = str(_pop_flag(config, "output_dir"))
    fonts_dir = str(_pop_flag(config, "fonts_dir"))
    sf_version = str(_pop_flag(config, "sf_version"))
    sources_dir = str(_pop_flag(config, "sources_dir"))
    icons_list = _pop_flag(config, "icons_list") or None
    path_precision = int(_pop_flag(config, "path_precision"))

    if config:
        raise ValueError(f"Unexpected config: {config}")

    return SymbolConfig(
        canvas_size=canvas_size,
        padding=padding,
        weights=weights,
        output_dir=output_dir,
        fonts_dir=fonts_dir,
        sf_version=sf_version,
        sources_dir=sources_dir,
        icons_list=icons_list,
        path_precision=path_precision,
    ).validate()
