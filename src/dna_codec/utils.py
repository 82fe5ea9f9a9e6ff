# src/dna_codec/utils.py
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Gabriel Falque
# Distributed under the terms of the MIT License.
# (See accompanying file LICENSE or copy at https://opensource.org/license/mit/)

"""
Utility functions and constants for the dna_codec package.

Holds the protocol constants shared by encoder and decoder, the nucleotide
mapping tables, the error taxonomy and the padding helper.
"""
import logging
from typing import Dict, NamedTuple, Set

# --- Configure logging for this module ---
logger = logging.getLogger(__name__)


# --- Constants ---
FORMAT_VERSION: str = "1.1"

# Frame markers modelled on Saccharomyces cerevisiae promoter/terminator sites
PROMOTER: str = "ATGCATGC"
TERMINATOR: str = "TTAATTAA"
MARKER: str = "GGCCGGCC"

# Header tags
STRING_TAG: bytes = b"STRING:"
FILE_TAG: bytes = b"FILE:"
HEADER_DELIMITER: bytes = b":"

PADDING_BYTE: bytes = b" "
BITS_PER_BYTE: int = 8
BITS_PER_NUCLEOTIDE: int = 2
NUCLEOTIDES_PER_BYTE: int = BITS_PER_BYTE // BITS_PER_NUCLEOTIDE
CODON_LENGTH: int = 3

# 2-bit group <-> nucleotide
BITS_TO_NUCLEOTIDE: Dict[str, str] = {'00': 'A', '01': 'C', '10': 'G', '11': 'T'}
NUCLEOTIDE_TO_BITS: Dict[str, str] = {nt: bits for bits, nt in BITS_TO_NUCLEOTIDE.items()}

VALID_NUCLEOTIDES: Set[str] = set('ACGT')
VALID_BITS: Set[str] = set('01')

# --- Codon sets used for composition summaries ---
STANDARD_START_CODONS: Set[str] = {'ATG'}
STANDARD_STOP_CODONS: Set[str] = {'TAA', 'TAG', 'TGA'}


# --- Errors ---

class CodecError(ValueError):
    """Base class for every data error raised while encoding or decoding."""


class InvalidSymbolError(CodecError):
    """A character outside the expected alphabet ({A,C,G,T} or {0,1})."""


class MisalignedBitsError(CodecError):
    """A bit-string whose length does not fit the required group size."""


class InvalidFrameError(CodecError):
    """Missing or wrong PROMOTER / TERMINATOR+MARKER, or input too short."""


class MalformedHeaderError(CodecError):
    """An incomplete or unparseable STRING/FILE header."""


class UnrecognizedHeaderError(MalformedHeaderError):
    """A payload that carries neither a STRING nor a FILE tag."""


# --- Frame configuration ---

class FrameMarkers(NamedTuple):
    """
    Immutable set of constant sequences wrapped around every encoded body.

    Encoder and decoder must share the same markers; a decoder built with a
    different set cannot read another encoder's output.
    """
    promoter: str
    terminator: str
    marker: str

    @classmethod
    def create(cls, promoter: str, terminator: str, marker: str) -> "FrameMarkers":
        """
        Builds a validated marker set.

        Raises:
            InvalidSymbolError: If a marker is empty or contains characters
                                other than A, C, G, T.
        """
        for label, value in (("promoter", promoter), ("terminator", terminator), ("marker", marker)):
            if not value:
                raise InvalidSymbolError(f"Frame {label} must not be empty.")
            invalid_chars = set(value) - VALID_NUCLEOTIDES
            if invalid_chars:
                raise InvalidSymbolError(
                    f"Frame {label} '{value}' contains invalid nucleotides: {sorted(invalid_chars)}"
                )
        return cls(promoter, terminator, marker)

    @property
    def overhead(self) -> int:
        """Number of nucleotides the frame adds around a body."""
        return len(self.promoter) + len(self.terminator) + len(self.marker)

    @property
    def trailer(self) -> str:
        return self.terminator + self.marker


DEFAULT_FRAME_MARKERS: FrameMarkers = FrameMarkers.create(PROMOTER, TERMINATOR, MARKER)


# --- Functions ---

def padding_needed(payload_length: int) -> int:
    """Number of padding bytes that make `4 * payload_length` a multiple of 3."""
    count = 0
    while (NUCLEOTIDES_PER_BYTE * (payload_length + count)) % CODON_LENGTH != 0:
        count += 1
    return count


def pad_payload(payload: bytes) -> bytes:
    """
    Appends space characters (0x20) until the payload maps onto a whole
    number of codons.

    Each byte becomes 4 nucleotides, so the nucleotide count is a multiple
    of 3 exactly when the byte count is. At most two bytes are added.

    Args:
        payload (bytes): The tagged payload (header included).

    Returns:
        bytes: The padded payload.
    """
    count = padding_needed(len(payload))
    if count:
        logger.debug(f"Padding payload of {len(payload)} bytes with {count} space(s) for codon alignment.")
    return payload + PADDING_BYTE * count


def remove_padding(content: bytes) -> bytes:
    """
    Removes the trailing spaces that padding can have added.

    Padding never exceeds two bytes, so at most two trailing spaces are
    removed. Content that legitimately ends in spaces loses them as well.
    """
    max_padding = CODON_LENGTH - 1
    removed = 0
    while removed < max_padding and content.endswith(PADDING_BYTE):
        content = content[:-1]
        removed += 1
    if removed:
        logger.debug(f"Stripped {removed} trailing padding byte(s).")
    return content
