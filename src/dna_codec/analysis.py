# src/dna_codec/analysis.py
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Gabriel Falque
# Distributed under the terms of the MIT License.
# (See accompanying file LICENSE or copy at https://opensource.org/license/mit/)

"""
Composition summary for encoded nucleotide bodies.

Purely descriptive: nothing here accepts or rejects a sequence.
"""
import logging
from collections import Counter
from typing import Dict, Union

from Bio.Seq import Seq
from Bio.SeqUtils import gc_fraction # type: ignore

from .utils import CODON_LENGTH, STANDARD_START_CODONS, STANDARD_STOP_CODONS

# --- Configure logging for this module ---
logger = logging.getLogger(__name__)

SequenceSummaryType = Dict[str, Union[int, float]]


def count_codons(sequence_str: str) -> Counter:
    """Counts in-frame codons, ignoring an incomplete trailing codon."""
    last_full_codon_start = len(sequence_str) - (len(sequence_str) % CODON_LENGTH)
    return Counter(sequence_str[i:i + CODON_LENGTH] for i in range(0, last_full_codon_start, CODON_LENGTH))


def summarize_sequence(sequence: Union[str, Seq]) -> SequenceSummaryType:
    """
    Summarizes the composition of a nucleotide body.

    Args:
        sequence (Union[str, Seq]): An encoded body (frame removed) or any
                                    sequence over {A, C, G, T}.

    Returns:
        SequenceSummaryType: Dictionary with keys
            'Length'      - number of nucleotides
            'Codons'      - number of complete in-frame codons
            'GC'          - GC content as a percentage (0.0 for empty input)
            'StartCodons' - in-frame ATG codons
            'StopCodons'  - in-frame TAA/TAG/TGA codons
    """
    sequence_str = str(sequence)
    codon_counts = count_codons(sequence_str)
    gc_percent = float(gc_fraction(sequence_str)) * 100.0 if sequence_str else 0.0

    summary: SequenceSummaryType = {
        'Length': len(sequence_str),
        'Codons': sum(codon_counts.values()),
        'GC': gc_percent,
        'StartCodons': sum(codon_counts[c] for c in STANDARD_START_CODONS),
        'StopCodons': sum(codon_counts[c] for c in STANDARD_STOP_CODONS),
    }
    logger.debug(f"Sequence summary: {summary}")
    return summary


def format_summary(summary: SequenceSummaryType) -> str:
    return (
        f"{summary['Length']} nt, {summary['Codons']} codons, "
        f"GC {summary['GC']:.1f}%, {summary['StartCodons']} ATG, "
        f"{summary['StopCodons']} in-frame stop codon(s)"
    )
