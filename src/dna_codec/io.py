# src/dna_codec/io.py
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Gabriel Falque
# Distributed under the terms of the MIT License.
# (See accompanying file LICENSE or copy at https://opensource.org/license/mit/)

"""
Input/Output operations: raw input files, .dna files and decoded output files.

A .dna file holds exactly the framed sequence, ASCII, with no metadata.
"""
import logging
from pathlib import Path
from typing import Union

# --- Configure logging for this module ---
logger = logging.getLogger(__name__)

DNA_SUFFIX = ".dna"

PathLike = Union[str, Path]


class CodecIOError(OSError):
    """A file could not be read or written, or has the wrong suffix."""


def read_input_file(filepath: PathLike) -> bytes:
    """
    Reads the raw bytes of a file to be encoded.

    Raises:
        CodecIOError: If the file is missing or unreadable.
    """
    path = Path(filepath)
    logger.debug(f"Reading input file: {path}")
    try:
        return path.read_bytes()
    except FileNotFoundError as fnf_err:
        logger.error(f"Input file not found: '{path}'")
        raise CodecIOError(f"Input file not found: '{path}'") from fnf_err
    except OSError as os_err:
        logger.error(f"Could not read input file '{path}': {os_err}")
        raise CodecIOError(f"Could not read input file '{path}': {os_err}") from os_err


def dna_path_for(filepath: PathLike) -> Path:
    """Returns the .dna path an input file is encoded to (`<name>.dna`)."""
    path = Path(filepath)
    return path.with_name(path.name + DNA_SUFFIX)


def write_dna_file(filepath: PathLike, sequence: str) -> Path:
    """
    Writes a framed sequence to a .dna file, byte for byte.

    Returns:
        Path: The path written.

    Raises:
        CodecIOError: If the file cannot be written.
    """
    path = Path(filepath)
    try:
        path.write_bytes(sequence.encode('ascii'))
    except OSError as os_err:
        logger.error(f"Could not write DNA file '{path}': {os_err}")
        raise CodecIOError(f"Could not write DNA file '{path}': {os_err}") from os_err
    logger.debug(f"Wrote {len(sequence)} nucleotides to {path}")
    return path


def read_dna_file(filepath: PathLike) -> str:
    """
    Reads a framed sequence from a .dna file.

    Raises:
        CodecIOError: If the suffix is not .dna, or the file is missing,
                      unreadable or not ASCII.
    """
    path = Path(filepath)
    if path.suffix != DNA_SUFFIX:
        logger.error(f"Invalid file suffix for '{path}', expecting a {DNA_SUFFIX} file.")
        raise CodecIOError(f"Invalid file suffix for '{path}', expecting a {DNA_SUFFIX} file.")
    try:
        raw = path.read_bytes()
    except FileNotFoundError as fnf_err:
        logger.error(f"DNA file not found: '{path}'")
        raise CodecIOError(f"DNA file not found: '{path}'") from fnf_err
    except OSError as os_err:
        logger.error(f"Could not open DNA file '{path}': {os_err}")
        raise CodecIOError(f"Could not open DNA file '{path}': {os_err}") from os_err

    try:
        sequence = raw.decode('ascii')
    except UnicodeDecodeError as decode_err:
        logger.error(f"DNA file '{path}' contains non-ASCII bytes.")
        raise CodecIOError(f"DNA file '{path}' is not an ASCII nucleotide file.") from decode_err
    logger.debug(f"Read {len(sequence)} characters from {path}")
    return sequence


def write_decoded_file(output_dir: PathLike, file_name: str, content: bytes) -> Path:
    """
    Writes recovered file content into `output_dir`.

    Only the final component of `file_name` is used, so a decoded header
    cannot direct the write outside `output_dir`.

    Returns:
        Path: The path written.

    Raises:
        CodecIOError: If the name has no usable component or the file
                      cannot be written.
    """
    safe_name = Path(file_name).name
    if safe_name in ("", ".", ".."):
        logger.error(f"Recovered file name '{file_name}' is not usable as an output file name.")
        raise CodecIOError(f"Recovered file name '{file_name}' is not usable.")
    if safe_name != file_name:
        logger.warning(f"Recovered file name '{file_name}' reduced to '{safe_name}'.")

    out_path = Path(output_dir) / safe_name
    try:
        out_path.write_bytes(content)
    except OSError as os_err:
        logger.error(f"Could not create output file '{out_path}': {os_err}")
        raise CodecIOError(f"Could not create output file '{out_path}': {os_err}") from os_err
    logger.debug(f"Wrote {len(content)} bytes to {out_path}")
    return out_path
