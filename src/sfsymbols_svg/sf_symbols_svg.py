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

"""Convert SF Symbols to svg files, one per symbol and weight.

Each symbol is drawn from the SF Pro Text font of the weight, scaled to fit the
canvas minus padding and centered.

Sample usage:
sf-symbols-svg --fonts_dir ~/Library/Fonts --weight all
sf-symbols-svg -s 32 -p 4 --icons_list my_icons.txt --output_dir ./my-icons
"""
from absl import app
from absl import flags
from absl import logging
from fontTools import ttLib
from pathlib import Path
from sfsymbols_svg import __version__
from sfsymbols_svg import config, sources, symbols, util
from sfsymbols_svg.config import SymbolConfig
from sfsymbols_svg.fonts import WeightedFont, load_fonts
from sfsymbols_svg.symbol_svg import render_symbol
from sfsymbols_svg.symbols import Symbol
import sys
from typing import Optional, Sequence, Tuple


FLAGS = flags.FLAGS


flags.DEFINE_string("config", None, "Config file, TOML. Flags override its values.")
flags.DEFINE_string(
    "log_level",
    "INFO",
    "The threshold for what messages will be logged. One of DEBUG, INFO, WARN, "
    "ERROR, or FATAL.",
)
flags.DEFINE_bool("version", False, "Print the version and exit.")


def _active_symbols(
    all_symbols: Tuple[Symbol, ...], icons_list: Optional[str]
) -> Tuple[Symbol, ...]:
    if not icons_list:
        return all_symbols
    try:
        icon_names = symbols.read_icon_names(Path(icons_list))
    except (OSError, UnicodeDecodeError) as e:
        logging.error("Error reading icons list file %s: %s", icons_list, e)
        logging.warning("Using all available icons.")
        return all_symbols
    return symbols.select(all_symbols, icon_names)


def _write_symbol(
    out_dir: Path,
    weighted_font: WeightedFont,
    symbol: Symbol,
    symbol_config: SymbolConfig,
) -> bool:
    try:
        rendered = render_symbol(
            weighted_font.font,
            weighted_font.weight,
            symbol.name,
            symbol.char,
            symbol_config.fit_options,
            symbol_config.path_precision,
        )
    except (KeyError, ValueError, ttLib.TTLibError) as e:
        logging.error(
            "Error generating svg for %s (%s): %s", symbol.name, weighted_font.weight, e
        )
        return False

    if rendered is None:
        logging.debug(
            "Nothing to draw for %s (%s), skipped", symbol.name, weighted_font.weight
        )
        return False

    util.write_text(out_dir / rendered.filename(), rendered.tostring())
    return True


def make_svgs(symbol_config: SymbolConfig) -> int:
    """Write one svg per symbol and weight; returns the number of files written."""
    version, data_files = sources.resolve(
        Path(symbol_config.sources_dir), symbol_config.sf_version
    )
    logging.info("Using symbols %s", version)

    logging.info("Loading fonts...")
    fonts = load_fonts(Path(symbol_config.fonts_dir), symbol_config.weights)
    logging.info("Fonts loaded: %s", ", ".join(f.weight for f in fonts))

    active_symbols = _active_symbols(
        symbols.load(data_files.symbols, data_files.names), symbol_config.icons_list
    )

    out_dir = Path(symbol_config.output_dir)
    logging.info("Output directory: %s", out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    written = 0
    for i, symbol in enumerate(active_symbols):
        logging.debug("%d/%d - %s", i + 1, len(active_symbols), symbol.name)
        for weighted_font in fonts:
            if _write_symbol(out_dir, weighted_font, symbol, symbol_config):
                written += 1

    logging.info("Done! Generated %d svg files in %s", written, out_dir)
    return written


def _run(argv: Sequence[str]):
    if FLAGS.version:
        print(__version__)
        return

    logging.set_verbosity(FLAGS.log_level)

    config_file = Path(FLAGS.config) if FLAGS.config else None
    try:
        make_svgs(config.load(config_file))
    except (FileNotFoundError, ValueError) as e:
        logging.error("Error generating svgs: %s", e)
        sys.exit(1)


def main():
    # We don't seem to be __main__ when run as cli tool installed by setuptools
    app.run(_run)


if __name__ == "__main__":
    app.run(_run)
