# src/dna_codec/cli.py
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Gabriel Falque
# Distributed under the terms of the MIT License.
# (See accompanying file LICENSE or copy at https://opensource.org/license/mit/)

"""
Command-Line Interface for the DNA codec.

Four modes, exactly one per invocation:
    -e MESSAGE    encode a message and print the framed sequence
    -d SEQUENCE   decode a framed sequence and print the message
    -i FILE       encode a file into FILE.dna
    -o DNA_FILE   decode a .dna file back to its original name and content
"""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from . import analysis
from . import codec
from . import io
from .utils import FORMAT_VERSION, CodecError

# --- Configure logging ---
# Get a logger specific to this application
logger = logging.getLogger("dna_codec")


def _log_body_summary(framed_sequence: str) -> None:
    if logger.isEnabledFor(logging.DEBUG):
        body = codec.unframe(framed_sequence)
        logger.debug(f"Encoded body: {analysis.format_summary(analysis.summarize_sequence(body))}")


def handle_encode_string(args: argparse.Namespace) -> None:
    """Handles -e: prints the framed sequence for a message."""
    logger.info("Encoding message to DNA sequence.")
    framed = codec.encode_string(args.encode)
    _log_body_summary(framed)
    print(f"{FORMAT_VERSION} || Encoded: {framed}")


def handle_decode_string(args: argparse.Namespace) -> None:
    """Handles -d: prints the message carried by a framed sequence."""
    logger.info("Decoding DNA sequence to message.")
    message = codec.decode_string(args.decode, strip_padding=args.strip_padding)
    print(f"Decoded: {message}")


def handle_encode_file(args: argparse.Namespace) -> None:
    """Handles -i: encodes a file into <file>.dna next to it."""
    input_path = Path(args.input_file)
    logger.info(f"Encoding file '{input_path}' to DNA sequence.")
    contents = io.read_input_file(input_path)
    framed = codec.encode_file(contents, input_path.name)
    _log_body_summary(framed)
    out_path = io.write_dna_file(io.dna_path_for(input_path), framed)
    logger.info(f"Encoded {len(contents)} bytes to '{out_path}'.")


def handle_decode_file(args: argparse.Namespace) -> None:
    """Handles -o: restores the file carried by a .dna file."""
    logger.info(f"Decoding DNA file '{args.output_file}'.")
    sequence = io.read_dna_file(args.output_file)
    decoded = codec.decode_file(sequence, strip_padding=args.strip_padding)
    out_path = io.write_decoded_file(args.output_dir, decoded.file_name, decoded.content)
    print(f"Decoded to file: {out_path}")


def build_parser() -> argparse.ArgumentParser:
    try:
        from . import __version__ as pkg_version
    except ImportError: # pragma: no cover
        pkg_version = "unknown"

    parser = argparse.ArgumentParser(
        prog="dna_codec",
        description="DNA Codec: encode messages and files into framed A/C/G/T sequences, and back.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("-v",
                        "--verbose",
                        action="store_true",
                        help="Increase output verbosity (set logging to DEBUG).")
    parser.add_argument('--version',
                        action='version',
                        version=f'%(prog)s {pkg_version} (format {FORMAT_VERSION})')

    mode_group = parser.add_mutually_exclusive_group(required=True)
    mode_group.add_argument("-e",
                            dest="encode",
                            metavar="MESSAGE",
                            help="Encode a message and print the framed DNA sequence. "
                                 "Use -e=MESSAGE for a message that starts with '-'.")
    mode_group.add_argument("-d",
                            dest="decode",
                            metavar="SEQUENCE",
                            help="Decode a framed DNA sequence and print the message.")
    mode_group.add_argument("-i",
                            dest="input_file",
                            metavar="FILE",
                            help="Encode FILE into FILE.dna.")
    mode_group.add_argument("-o",
                            dest="output_file",
                            metavar="DNA_FILE",
                            help="Decode a .dna file back to its original file name and content.")

    parser.add_argument("--strip-padding",
                        action="store_true",
                        help="With -d/-o, remove up to two trailing padding spaces from the decoded content.")
    parser.add_argument("--output-dir",
                        type=Path,
                        default=Path("."),
                        help="With -o, directory where the recovered file is written.")
    return parser


def main() -> None:
    """Main CLI entry point."""
    parser = build_parser()

    # --- Parse Arguments ---
    args = parser.parse_args()

    # --- Configure Logging ---
    log_level = logging.DEBUG if args.verbose else logging.INFO
    handler_to_use: logging.Handler = RichHandler(
        console=Console(stderr=True), rich_tracebacks=True, show_path=False, markup=False,
        show_level=True, log_time_format="[%X]"
    )
    handler_to_use.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    # Configure the application's specific logger
    app_logger = logging.getLogger("dna_codec")
    if app_logger.hasHandlers(): # pragma: no cover
        app_logger.handlers.clear()
    app_logger.addHandler(handler_to_use)
    app_logger.setLevel(log_level)

    if args.verbose:
        logger.debug(f"Full arguments: {args}")

    if args.encode is not None:
        handler = handle_encode_string
    elif args.decode is not None:
        handler = handle_decode_string
    elif args.input_file is not None:
        handler = handle_encode_file
    else:
        handler = handle_decode_file

    try:
        handler(args)
    except CodecError as codec_err:
        logger.error(f"Codec error: {codec_err}")
        sys.exit(1)
    except io.CodecIOError as io_err:
        logger.error(f"I/O error: {io_err}")
        sys.exit(1)
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == '__main__': # pragma: no cover
    main()
