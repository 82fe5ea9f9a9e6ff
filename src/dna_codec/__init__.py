# src/dna_codec/__init__.py

# Copyright (c) 2025 Gabriel Falque
# Distributed under the terms of the MIT License.
# (See accompanying file LICENSE or copy at https://opensource.org/license/mit/)

# This file makes Python treat the directory as a package.
# The codec entry points are re-exported for convenience.

__version__ = "1.1.0"

from .codec import encode_string, decode_string, encode_file, decode_file, decode
from .utils import (
    CodecError,
    InvalidSymbolError,
    MisalignedBitsError,
    InvalidFrameError,
    MalformedHeaderError,
    UnrecognizedHeaderError,
    FrameMarkers,
    DEFAULT_FRAME_MARKERS,
)
