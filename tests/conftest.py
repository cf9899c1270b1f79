import os
import sys

import pytest

# Add project root to path so the flat modules import without installation
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from domino_tokens import Variant


@pytest.fixture(params=list(Variant), ids=lambda v: v.value)
def variant(request):
    """Each scoring variant in turn."""
    return request.param
