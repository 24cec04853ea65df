# tests/conftest.py

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src/ is on sys.path for test imports like `import pathfinding`.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"

if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from pathfinding.testing.fakes import FakeBlockWorld


@pytest.fixture
def flat_world() -> FakeBlockWorld:
    """Open world with solid floor at y=63; the walkable layer is y=64."""
    return FakeBlockWorld(floor_y=63)
