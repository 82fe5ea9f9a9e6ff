# src/dna_codec/symbols.py
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Gabriel Falque
# Distributed under the terms of the MIT License.
# (See accompanying file LICENSE or copy at https://opensource.org/license/mit/)

"""
Symbol layer: conversions between bytes, bit-strings and nucleotide strings.

A bit-string is a `str` made of '0' and '1' characters. Every nucleotide
carries exactly two bits (A=00, C=01, G=10, T=11) and every byte is rendered
as eight bits, most significant bit first.
"""
import logging
from typing import Union

import numpy as np
from Bio.Seq import Seq

from .utils import (
    BITS_PER_BYTE,
    BITS_PER_NUCLEOTIDE,
    BITS_TO_NUCLEOTIDE,
    NUCLEOTIDE_TO_BITS,
    VALID_BITS,
    InvalidSymbolError,
    MisalignedBitsError,
)

# --- Configure logging for this module ---
logger = logging.getLogger(__name__)

_ASCII_ZERO = ord('0')


def _check_bit_chars(bits: str) -> None:
    invalid_chars = set(bits) - VALID_BITS
    if invalid_chars:
        logger.error(f"Bit-string contains characters other than '0'/'1': {sorted(invalid_chars)}")
        raise InvalidSymbolError(f"Bit-string contains invalid characters: {sorted(invalid_chars)}")


def encode_symbols(bits: str) -> str:
    """
    Maps a bit-string onto nucleotides, two bits per symbol, left to right.

    Args:
        bits (str): Bit-string of even length.

    Returns:
        str: Nucleotide string of length len(bits) / 2.

    Raises:
        MisalignedBitsError: If the bit-string has odd length.
        InvalidSymbolError: If it contains anything other than '0'/'1'.
    """
    if len(bits) % BITS_PER_NUCLEOTIDE != 0:
        logger.error(f"Cannot encode odd-length bit-string ({len(bits)} bits) into nucleotides.")
        raise MisalignedBitsError(
            f"Bit-string length {len(bits)} is not a multiple of {BITS_PER_NUCLEOTIDE}."
        )
    _check_bit_chars(bits)
    return "".join(
        BITS_TO_NUCLEOTIDE[bits[i:i + BITS_PER_NUCLEOTIDE]]
        for i in range(0, len(bits), BITS_PER_NUCLEOTIDE)
    )


def decode_symbols(nucleotides: Union[str, Seq]) -> str:
    """
    Maps nucleotides back to a bit-string, one symbol to exactly two bits.

    Args:
        nucleotides (Union[str, Seq]): Sequence over {A, C, G, T}.

    Returns:
        str: Bit-string of length 2 * len(nucleotides).

    Raises:
        InvalidSymbolError: On the first character outside {A, C, G, T}.
    """
    sequence_str = str(nucleotides)
    bit_groups = []
    for position, nucleotide in enumerate(sequence_str):
        bits = NUCLEOTIDE_TO_BITS.get(nucleotide)
        if bits is None:
            logger.error(f"Invalid nucleotide '{nucleotide}' at position {position}.")
            raise InvalidSymbolError(f"Invalid nucleotide '{nucleotide}' at position {position}.")
        bit_groups.append(bits)
    return "".join(bit_groups)


def bytes_to_bits(payload: bytes) -> str:
    """Renders each byte as 8 bits, most significant bit first."""
    bit_array = np.unpackbits(np.frombuffer(payload, dtype=np.uint8))
    return (bit_array + _ASCII_ZERO).astype(np.uint8).tobytes().decode('ascii')


def bits_to_bytes(bits: str) -> bytes:
    """
    Rebuilds bytes from consecutive 8-bit groups (big-endian).

    Raises:
        MisalignedBitsError: If the length is not a multiple of 8.
        InvalidSymbolError: If it contains anything other than '0'/'1'.
    """
    if len(bits) % BITS_PER_BYTE != 0:
        logger.error(f"Bit-string of {len(bits)} bits does not split into whole bytes.")
        raise MisalignedBitsError(f"Bit-string length {len(bits)} is not a multiple of {BITS_PER_BYTE}.")
    _check_bit_chars(bits)
    bit_array = np.frombuffer(bits.encode('ascii'), dtype=np.uint8) - _ASCII_ZERO
    return np.packbits(bit_array).tobytes()
