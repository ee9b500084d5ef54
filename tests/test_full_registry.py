"""Tests against the complete registry bundled with language_data."""
import pytest

import bcp47tags
from bcp47tags import config, registry
from bcp47tags.registry import LanguageSubtagRegistry
from bcp47tags.subtag import SubTag
from bcp47tags.tag import ERR_DEPRECATED, ERR_NO_LANGUAGE, Tag


@pytest.fixture(scope="module")
def full_registry():
    return LanguageSubtagRegistry.load(config.default_registry_file())


@pytest.fixture(autouse=True)
def _use_full_registry(full_registry, monkeypatch):
    monkeypatch.setattr(registry, "_registry", full_registry)


@pytest.mark.parametrize("tag", ["ru", "pt-BR", "it", "hi-IN", "ja-JP",
                                 "sr-Latn-RS", "de-CH-1996"])
def test_common_tags_are_valid(tag):
    assert bcp47tags.errors(tag) == []
    assert bcp47tags.check(tag)


def test_decomposition():
    assert [(st.type(), st.format()) for st in Tag("sr-latn-rs")] == [
        ("language", "sr"), ("script", "Latn"), ("region", "RS")]


def test_grandfathered_tags():
    assert Tag("i-default").errors() == [ERR_NO_LANGUAGE]
    assert Tag("i-mingo").errors() == [ERR_NO_LANGUAGE]
    assert Tag("en-GB-oed").errors() == [ERR_DEPRECATED]


def test_macrolanguage_members():
    members = bcp47tags.languages("zh")
    assert SubTag("cmn", "language") in members
    assert SubTag("yue", "language") in members


def test_types_of_region_code():
    assert bcp47tags.types("jp") == ["region"]
    assert bcp47tags.types("ru") == ["language", "region"]
