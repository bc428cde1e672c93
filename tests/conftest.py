import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import slideshow_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Listing from the "a_example" input: two horizontal, two vertical pictures
EXAMPLE_LISTING = """4
H 3 cat beach sun
V 2 selfie smile
V 2 garden selfie
H 2 garden cat
"""


# Common test fixtures
@pytest.fixture
def example_listing() -> str:
    """Return the example listing text."""
    return EXAMPLE_LISTING


@pytest.fixture
def input_dir(tmp_path: Path) -> Path:
    """Create an input directory holding the example as input 'a'."""
    directory = tmp_path / "inputs"
    directory.mkdir()
    (directory / "a_example.txt").write_text(EXAMPLE_LISTING, encoding="utf-8")
    return directory
