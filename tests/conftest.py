import os
import sys

import pytest

# Ensure project root is on sys.path so top-level packages (e.g., economy, cards) are importable
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from economy.runtime import shutdown_bank


@pytest.fixture(autouse=True)
def fresh_bank():
    """Every test starts without a process-wide bank."""
    shutdown_bank()
    yield
    shutdown_bank()
