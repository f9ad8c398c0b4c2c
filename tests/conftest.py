"""Shared fixtures: a small three-proposal corpus."""

from pathlib import Path

import pytest

from proposal_search.core.engine import SearchEngine
from proposal_search.core.index import FuzzyIndex
from proposal_search.core.loader import load_documents
from proposal_search.core.store import DocumentStore

PACKAGE_DATA_DIR = Path(__file__).resolve().parent.parent / "proposal_search" / "data"

SCENARIO_BLOBS = [
    (
        "a.md",
        "---\nid: 101\nprogram_title: Deep Survey of M82\n---\nWe study M82 in detail\n",
    ),
    (
        "b.md",
        "---\nid: 102\nprogram_title: NGC 1068 AGN\n---\nNGC 1068 hosts an active nucleus\n",
    ),
    (
        "c.md",
        "---\nid: 103\nprogram_title: Unrelated Target\n---\nno relevant keywords here\n",
    ),
]


def make_blob(program_id, title, content, **fields):
    """Render a proposal record with front matter."""
    lines = ["---", f"id: {program_id}", f"program_title: {title}"]
    lines.extend(f"{key}: {value}" for key, value in fields.items())
    lines.extend(["---", content, ""])
    return "\n".join(lines)


@pytest.fixture
def scenario_documents():
    """The three parsed scenario documents."""
    return load_documents(SCENARIO_BLOBS)


@pytest.fixture
def scenario_store(scenario_documents):
    """Store over the scenario documents."""
    return DocumentStore(scenario_documents)


@pytest.fixture
def scenario_index(scenario_store):
    """Fuzzy index over the scenario store."""
    return FuzzyIndex(scenario_store)


@pytest.fixture
def scenario_engine():
    """Search engine over the scenario corpus."""
    return SearchEngine.from_blobs(SCENARIO_BLOBS)


@pytest.fixture
def sample_engine():
    """Search engine over the sample corpus shipped with the package."""
    return SearchEngine.from_directory(PACKAGE_DATA_DIR)


@pytest.fixture
def scenario_blobs():
    """Raw ``(source_name, text)`` pairs of the scenario corpus."""
    return list(SCENARIO_BLOBS)


@pytest.fixture
def blob_factory():
    """Build raw proposal records for ad-hoc corpora."""
    return make_blob


@pytest.fixture
def package_data_dir():
    """Directory of the sample corpus shipped with the package."""
    return PACKAGE_DATA_DIR
