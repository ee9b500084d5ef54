import os

import pytest

from bcp47tags import registry
from bcp47tags.registry import LanguageSubtagRegistry

SAMPLE_REGISTRY_FILE = os.path.join(
    os.path.dirname(os.path.abspath(__file__)),
    "data", "language-subtag-registry")


@pytest.fixture(scope="session")
def sample_registry():
    return LanguageSubtagRegistry.load(SAMPLE_REGISTRY_FILE)


@pytest.fixture(autouse=True)
def _use_sample_registry(sample_registry, monkeypatch):
    """Run every test against the small registry excerpt in tests/data."""
    monkeypatch.setattr(registry, "_registry", sample_registry)
