import os
import sys

import pytest

# Ensure tests can import top-level modules when pytest changes CWD.
REPO_ROOT = os.path.dirname(os.path.dirname(__file__))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)


@pytest.fixture
def known_results():
    """Expressions with their values, worked out by hand with left-to-right grouping."""
    return {
        "3a2c4": 20,  # (3 + 2) * 4
        "32a2d2": 17,  # (32 + 2) / 2
        "500a10b66c32": 14208,  # ((500 + 10) - 66) * 32
        "3ae4c66fb32": 235,  # (3 + (4 * 66)) - 32
        "3c4d2aee2a4c41fc4f": 990,  # ((3 * 4) / 2) + (((2 + 4) * 41) * 4)
    }
