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

"""Helps deal with symbol names and characters.

symbols.txt is a run of fixed width tokens, 2 UTF-16 code units each, so a single
supplementary plane character per symbol. names.txt has one name per line. The
n-th token belongs to the n-th name.
"""

from absl import logging
from pathlib import Path
import regex
from typing import Iterable, NamedTuple, Sequence, Tuple


_TOKEN_BYTES = 4  # 2 UTF-16 code units
_UTF16 = "utf-16-le"


class Symbol(NamedTuple):
    name: str
    char: str


def _utf16_tokens(segment: str) -> Iterable[str]:
    encoded = segment.encode(_UTF16, "surrogatepass")
    for i in range(0, len(encoded), _TOKEN_BYTES):
        yield encoded[i : i + _TOKEN_BYTES].decode(_UTF16, "surrogatepass")


def parse_chars(text: str) -> Tuple[str, ...]:
    # tokens never span a line terminator
    return tuple(
        token
        for segment in regex.split(r"[\n\r\u2028\u2029]", text)
        for token in _utf16_tokens(segment)
        if token
    )


def parse_names(text: str) -> Tuple[str, ...]:
    return tuple(name for name in regex.split(r"\r?\n", text) if name)


def pair(names: Sequence[str], chars: Sequence[str]) -> Tuple[Symbol, ...]:
    if len(names) != len(chars):
        logging.warning(
            "%d names but %d symbol characters; only the first %d will be used",
            len(names),
            len(chars),
            min(len(names), len(chars)),
        )
    return tuple(Symbol(name, char) for name, char in zip(names, chars))


def load(symbols_file: Path, names_file: Path) -> Tuple[Symbol, ...]:
    chars = parse_chars(symbols_file.read_text(encoding="utf-8"))
    names = parse_names(names_file.read_text(encoding="utf-8"))
    return pair(names, chars)


def read_icon_names(icons_list_file: Path) -> Tuple[str, ...]:
    return parse_names(icons_list_file.read_text(encoding="utf-8"))


def select(symbols: Sequence[Symbol], icon_names: Sequence[str]) -> Tuple[Symbol, ...]:
    """The symbols named in icon_names, in icon_names order.

    Falls back to all symbols when icon_names is empty or matches nothing.
    """
    if not icon_names:
        logging.warning("Icons list is empty. Using all available icons.")
        return tuple(symbols)

    by_name = {}
    for symbol in symbols:
        by_name.setdefault(symbol.name, symbol)

    selected = []
    for icon_name in icon_names:
        symbol = by_name.get(icon_name)
        if symbol is None:
            logging.warning("Icon '%s' not found in available icons.", icon_name)
            continue
        selected.append(symbol)

    if not selected:
        logging.warning(
            "None of the specified icons were found. Using all available icons."
        )
        return tuple(symbols)

    logging.info("Processing %d icons from list file.", len(selected))
    return tuple(selected)
