"""
Shared fixtures for line sorting tests.
Creates isolated temporary directories with controlled text files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so 'linesorter' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def text_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled text files for sorting scenarios:
    - words: plain words, LF endings
    - integers: integers with a blank line, LF endings + final newline
    - decimal_comma: decimals with comma separator, CRLF endings
    - decimal_dot: decimals with dot separator and units after the numbers
    - broken: integers with one line that holds no number
    """
    files = {}

    files["words"] = temp_dir / "words.txt"
    files["words"].write_bytes(b"banana\napple\ncherry")

    files["integers"] = temp_dir / "integers.txt"
    files["integers"].write_bytes(b"10\n2\n\n-5\n")

    files["decimal_comma"] = temp_dir / "decimal_comma.txt"
    files["decimal_comma"].write_bytes(b"3,5\r\n1,25\r\n-0,5\r\n")

    files["decimal_dot"] = temp_dir / "decimal_dot.txt"
    files["decimal_dot"].write_bytes(b"3.5 kg\n1.25 kg\n \n12 kg\n")

    files["broken"] = temp_dir / "broken.txt"
    files["broken"].write_bytes(b"1\n2\nthree\n4\n")

    return files
