import random
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from dlp_utils import BACKENDS
from dlp_utils.generator import generate_test_case


@pytest.fixture(params=sorted(BACKENDS))
def backend(request):
    return BACKENDS[request.param]


@pytest.fixture
def small_case(tmp_path):
    """A generated 16-bit case in tmp_path; returns (case_path, p, g, h, x)."""
    p, g, h, x = generate_test_case(tmp_path, 1, 16, rng=random.Random(1234))
    return tmp_path / 'case_1.txt', p, g, h, x
