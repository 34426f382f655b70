"""Shared fixtures and helpers for cayleynet tests."""

import pathlib
import shutil
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]  # project root
sys.path.insert(0, str(ROOT))

from cayleynet.builders.breadth_first import (  # noqa: E402
    BreadthFirstGraphBuilder,
    ColorGraphBuilder,
)
from cayleynet.groups.permutation import Permutation  # noqa: E402

# colors 1 <-> 2 and 3 <-> 4
INVOLUTION = {1: 2, 2: 1, 3: 4, 4: 3}

# ======================================================================
# FIXTURES
# ======================================================================


@pytest.fixture
def star_builder():
    """Breadth-first builder holding r-a, r-b, a-c (not finished).

    Indices r=1, a=2, b=3, c=4; shells {r}, {a, b}, {c}.
    """
    b = BreadthFirstGraphBuilder("r")
    assert b.join("r", "a")
    assert b.join("r", "b")
    assert b.join("a", "c")
    return b


@pytest.fixture
def star_graph(star_builder):
    """Finished version of ``star_builder``."""
    return star_builder.finish()


@pytest.fixture
def color_builder():
    """Color builder holding r -1-> a, r -3-> b, a -1-> c (not finished)."""
    b = ColorGraphBuilder("r", INVOLUTION)
    assert b.join("r", "a", 1)
    assert b.join("r", "b", 3)
    assert b.join("a", "c", 1)
    return b


@pytest.fixture
def color_graph(color_builder):
    return color_builder.finish()


@pytest.fixture
def s3_generators():
    """Transposition (0 1) and the 3-cycle (0 1 2) with its inverse."""
    t = Permutation.cycle(3, 0, 1, 2)
    return [Permutation.cycle(3, 0, 1), t, t.inverse()]


@pytest.fixture
def s4_generators():
    """Transposition (0 1) and the 4-cycle (0 1 2 3) with its inverse."""
    t = Permutation.cycle(4, 0, 1, 2, 3)
    return [Permutation.cycle(4, 0, 1), t, t.inverse()]


@pytest.fixture
def tmpdir_fixture():
    """Temporary directory for file I/O (input/output) tests."""
    tmpdir = Path(tempfile.mkdtemp())
    yield tmpdir
    shutil.rmtree(tmpdir)


# ======================================================================
# HELPERS
# ======================================================================


def assert_shells_consistent(G):
    """Assert the breadth-first layering invariants of a finished graph."""
    sizes = G.shell_sizes()
    assert int(sizes.sum()) == G.vertex_count(), "shells do not cover every vertex"
    assert G.distance_from_root(G.root) == 0
    starts = G.shell_start_indices()
    assert list(starts) == sorted(starts), "shell starts not increasing"
    for v in G.vertices():
        dv = G.distance_from_root(v)
        for w in G.neighbors_of(v):
            assert abs(G.distance_from_root(w) - dv) <= 1, f"edge {v}-{w} skips a shell"
        idx = [G.index_of(w) for w in G.neighbors_of(v)]
        assert idx == sorted(idx), f"neighbors of {v} not sorted by index"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
