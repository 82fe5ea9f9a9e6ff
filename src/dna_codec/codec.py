# src/dna_codec/codec.py
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Gabriel Falque
# Distributed under the terms of the MIT License.
# (See accompanying file LICENSE or copy at https://opensource.org/license/mit/)

"""
Framing layer and top-level codec operations.

Encoding pipeline:
    tag payload -> pad to codon boundary -> bytes to bits -> bits to
    nucleotides -> wrap with PROMOTER / TERMINATOR / MARKER.

Decoding runs the same steps in reverse and parses the header to recover
the payload kind and content. Every function is stateless.
"""
import logging
from typing import NamedTuple, Optional, Union

from Bio.Seq import Seq

from .symbols import bits_to_bytes, bytes_to_bits, decode_symbols, encode_symbols
from .utils import (
    DEFAULT_FRAME_MARKERS,
    FILE_TAG,
    HEADER_DELIMITER,
    STRING_TAG,
    FrameMarkers,
    InvalidFrameError,
    MalformedHeaderError,
    UnrecognizedHeaderError,
    pad_payload,
    remove_padding,
)

# --- Configure logging for this module ---
logger = logging.getLogger(__name__)

KIND_STRING = "STRING"
KIND_FILE = "FILE"


class DecodedPayload(NamedTuple):
    """Parsed payload: kind is 'STRING' or 'FILE'; name is set for files only."""
    kind: str
    name: Optional[str]
    content: bytes


class DecodedFile(NamedTuple):
    file_name: str
    content: bytes


# === Header / Tagging ===

def build_string_payload(text: str) -> bytes:
    return STRING_TAG + text.encode('utf-8')


def build_file_payload(file_bytes: bytes, file_name: str) -> bytes:
    """
    Prefixes file bytes with the FILE header.

    Raises:
        MalformedHeaderError: If the name is empty or contains ':', which
                              would make the header unparseable, or if
                              the content is empty, which the decoder
                              rejects.
    """
    if not file_name:
        logger.error("File name is empty and cannot be embedded in a FILE header.")
        raise MalformedHeaderError("File name must not be empty.")
    if ':' in file_name:
        logger.error(f"File name '{file_name}' contains ':' and cannot be embedded in a FILE header.")
        raise MalformedHeaderError(f"File name '{file_name}' must not contain ':'.")
    if not file_bytes:
        logger.error(f"File '{file_name}' is empty; a FILE payload needs content.")
        raise MalformedHeaderError("File content must not be empty.")
    return FILE_TAG + file_name.encode('utf-8') + HEADER_DELIMITER + file_bytes


def parse_payload(payload: bytes) -> DecodedPayload:
    """
    Parses a decoded (still padded) payload.

    Layouts:
        STRING:<content>
        FILE:<name>:<content>

    Args:
        payload (bytes): The payload recovered from the nucleotide body.

    Returns:
        DecodedPayload: Kind, optional file name, and content bytes.
                        Padding is left in place.

    Raises:
        MalformedHeaderError: For an incomplete FILE header (missing
                              delimiter, empty name, empty content) or a
                              name that is not valid UTF-8.
        UnrecognizedHeaderError: If neither tag is present.
    """
    if payload.startswith(STRING_TAG):
        return DecodedPayload(KIND_STRING, None, payload[len(STRING_TAG):])

    if payload.startswith(FILE_TAG):
        name_start = len(FILE_TAG)
        name_end = payload.find(HEADER_DELIMITER, name_start)
        if name_end == -1:
            logger.error("FILE header has no delimiter after the file name.")
            raise MalformedHeaderError("FILE header is missing the ':' after the file name.")
        raw_name = payload[name_start:name_end]
        content = payload[name_end + len(HEADER_DELIMITER):]
        if not raw_name:
            logger.error("FILE header carries an empty file name.")
            raise MalformedHeaderError("FILE header has an empty file name.")
        if not content:
            logger.error("FILE payload carries no content.")
            raise MalformedHeaderError("FILE payload has no content.")
        try:
            file_name = raw_name.decode('utf-8')
        except UnicodeDecodeError as decode_err:
            logger.error(f"FILE header name is not valid UTF-8: {decode_err}")
            raise MalformedHeaderError("FILE header name is not valid UTF-8.") from decode_err
        return DecodedPayload(KIND_FILE, file_name, content)

    preview = payload[:len(STRING_TAG)]
    logger.error(f"Unrecognized payload header: {preview!r}")
    raise UnrecognizedHeaderError(f"Unrecognized payload header: {preview!r}")


# === Framing ===

def frame(body: str, markers: FrameMarkers = DEFAULT_FRAME_MARKERS) -> str:
    """Wraps an encoded body as PROMOTER + body + TERMINATOR + MARKER."""
    return markers.promoter + body + markers.terminator + markers.marker


def unframe(sequence: Union[str, Seq], markers: FrameMarkers = DEFAULT_FRAME_MARKERS) -> str:
    """
    Strips the frame from a sequence and returns the encoded body.

    Leading and trailing whitespace is ignored.

    Raises:
        InvalidFrameError: If the sequence is shorter than the frame
                           overhead, or the PROMOTER / TERMINATOR+MARKER
                           do not match exactly.
    """
    sequence_str = str(sequence).strip()
    if len(sequence_str) < markers.overhead:
        logger.error(f"Sequence of length {len(sequence_str)} is shorter than the frame overhead ({markers.overhead}).")
        raise InvalidFrameError(
            f"Sequence length {len(sequence_str)} is shorter than the frame overhead {markers.overhead}."
        )
    if not sequence_str.startswith(markers.promoter):
        logger.error(f"Sequence does not start with PROMOTER '{markers.promoter}'.")
        raise InvalidFrameError(f"Sequence does not start with PROMOTER '{markers.promoter}'.")
    if not sequence_str.endswith(markers.trailer):
        logger.error(f"Sequence does not end with TERMINATOR+MARKER '{markers.trailer}'.")
        raise InvalidFrameError(f"Sequence does not end with TERMINATOR+MARKER '{markers.trailer}'.")
    return sequence_str[len(markers.promoter):len(sequence_str) - len(markers.trailer)]


# === Pipelines ===

def _encode_payload(payload: bytes, markers: FrameMarkers) -> str:
    padded = pad_payload(payload)
    body = encode_symbols(bytes_to_bits(padded))
    logger.debug(f"Encoded {len(payload)} payload bytes ({len(padded)} padded) into {len(body)} nucleotides.")
    return frame(body, markers)


def decode(sequence: Union[str, Seq], markers: FrameMarkers = DEFAULT_FRAME_MARKERS) -> DecodedPayload:
    """
    Decodes a framed sequence of either kind.

    Args:
        sequence (Union[str, Seq]): The framed nucleotide sequence.
        markers (FrameMarkers): The frame markers the encoder used.

    Returns:
        DecodedPayload: The parsed payload, padding still attached.

    Raises:
        CodecError: Any of its subclasses, depending on where decoding fails.
    """
    body = unframe(sequence, markers)
    payload = bits_to_bytes(decode_symbols(body))
    logger.debug(f"Decoded {len(body)} nucleotides into {len(payload)} payload bytes.")
    return parse_payload(payload)


def encode_string(text: str, markers: FrameMarkers = DEFAULT_FRAME_MARKERS) -> str:
    """Encodes a text message into a framed nucleotide sequence."""
    return _encode_payload(build_string_payload(text), markers)


def decode_string(
    sequence: Union[str, Seq],
    markers: FrameMarkers = DEFAULT_FRAME_MARKERS,
    strip_padding: bool = False
) -> str:
    """
    Decodes a framed sequence carrying a STRING payload.

    Trailing padding spaces are kept unless `strip_padding` is set.

    Raises:
        UnrecognizedHeaderError: If the payload is not a STRING payload.
        MalformedHeaderError: If the message is not valid UTF-8.
    """
    decoded = decode(sequence, markers)
    if decoded.kind != KIND_STRING:
        logger.error(f"Expected a STRING payload but found a {decoded.kind} payload.")
        raise UnrecognizedHeaderError(f"Expected a STRING payload, found {decoded.kind}.")
    content = remove_padding(decoded.content) if strip_padding else decoded.content
    try:
        return content.decode('utf-8')
    except UnicodeDecodeError as decode_err:
        logger.error(f"STRING payload is not valid UTF-8: {decode_err}")
        raise MalformedHeaderError("STRING payload is not valid UTF-8.") from decode_err


def encode_file(file_bytes: bytes, file_name: str, markers: FrameMarkers = DEFAULT_FRAME_MARKERS) -> str:
    """Encodes file contents, tagged with their file name, into a framed sequence."""
    return _encode_payload(build_file_payload(file_bytes, file_name), markers)


def decode_file(
    sequence: Union[str, Seq],
    markers: FrameMarkers = DEFAULT_FRAME_MARKERS,
    strip_padding: bool = False
) -> DecodedFile:
    """
    Decodes a framed sequence carrying a FILE payload.

    Returns:
        DecodedFile: The embedded file name and the file content. Trailing
                     padding spaces are kept unless `strip_padding`
                     is set.

    Raises:
        UnrecognizedHeaderError: If the payload is not a FILE payload.
    """
    decoded = decode(sequence, markers)
    if decoded.kind != KIND_FILE or decoded.name is None:
        logger.error(f"Expected a FILE payload but found a {decoded.kind} payload.")
        raise UnrecognizedHeaderError(f"Expected a FILE payload, found {decoded.kind}.")
    content = remove_padding(decoded.content) if strip_padding else decoded.content
    return DecodedFile(decoded.name, content)
