# tests/conftest.py
import pytest
from pathlib import Path
from typing import Dict

# Ensure the src directory is in the Python path for tests
# Note: Pytest often handles this automatically if run from the project root
# or after `pip install -e .`.
# import sys, os
# sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

# --- Reset Logging Configuration Fixture ---
@pytest.fixture(autouse=True)
def reset_logging_config(monkeypatch):
    """Reset logging configuration before each test to ensure proper log capture.

    The CLI attaches a RichHandler to the 'dna_codec' logger; this fixture
    removes it again so that every test starts from a clean logging state
    and pytest's caplog sees all records through propagation.
    """
    import logging

    # Completely reset the logging system
    logging.shutdown()
    logging.root.handlers.clear()

    # Monkeypatch the basicConfig to do nothing
    monkeypatch.setattr(logging, 'basicConfig', lambda **kwargs: None)

    # Ensure all loggers propagate to the root logger
    for name in logging.root.manager.loggerDict:
        logger = logging.getLogger(name)
        logger.handlers = []
        logger.propagate = True
        logger.disabled = False
        logger.setLevel(logging.NOTSET)

    # Reset the root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.NOTSET)
    root_logger.handlers = []

    # Add a NullHandler to avoid "No handlers could be found" warnings
    root_logger.addHandler(logging.NullHandler())

    yield

# --- General Codec Fixtures ---

@pytest.fixture
def hi_body() -> str:
    """Body for 'STRING:HI' (9 bytes, no padding): S T R I N G : H I."""
    return (
        "CCAT"  # S 0x53
        "CCCA"  # T 0x54
        "CCAG"  # R 0x52
        "CAGC"  # I 0x49
        "CATG"  # N 0x4E
        "CACT"  # G 0x47
        "ATGG"  # : 0x3A
        "CAGA"  # H 0x48
        "CAGC"  # I 0x49
    )

@pytest.fixture
def hi_framed(hi_body: str) -> str:
    """Framed sequence for the message 'HI' with the default markers."""
    return "ATGCATGC" + hi_body + "TTAATTAA" + "GGCCGGCC"

@pytest.fixture
def nucleotide_bits() -> Dict[str, str]:
    """The 2-bit code of each nucleotide."""
    return {'A': '00', 'C': '01', 'G': '10', 'T': '11'}

# --- Fixtures for I/O and CLI tests ---

@pytest.fixture
def sample_input_file(tmp_path: Path) -> Path:
    """A small binary file whose FILE payload needs no padding.

    'FILE:' (5) + 'sample.bin' (10) + ':' (1) + 8 content bytes = 24 bytes.
    The content contains a ':' to check that only the first delimiter splits.
    """
    path = tmp_path / "sample.bin"
    path.write_bytes(b"\x00\x01\xfe\xffAB:C")
    return path
