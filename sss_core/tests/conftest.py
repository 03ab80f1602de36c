from pathlib import Path

import pytest

GOLDEN_DIR = Path(__file__).resolve().parent / "golden"


@pytest.fixture
def golden_dir() -> Path:
    return GOLDEN_DIR
