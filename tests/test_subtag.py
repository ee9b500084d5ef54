"""Tests for single subtags (subtag.py), on the tests/data excerpt."""
import pytest

from bcp47tags.registry import SubtagNotFound
from bcp47tags.subtag import SubTag, format_code


# ---------------------------------------------------------------------------
# construction
# ---------------------------------------------------------------------------


def test_type_returns_kind():
    assert SubTag("zh", "language").type() == "language"
    assert SubTag("IQ", "region").type() == "region"
    assert SubTag("IQ", "Region").kind() == "region"


def test_unregistered_subtag_has_no_record():
    st = SubTag("zz", "language")
    assert st.record is None
    assert st.subtag == "zz"
    assert st.type() == "language"
    assert st.descriptions() == []
    assert st.comments() == []
    assert st.scope() is None
    assert st.preferred() is None


def test_invalid_kind_is_rejected():
    with pytest.raises(ValueError):
        SubTag("art-lojban", "grandfathered")
    with pytest.raises(ValueError):
        SubTag("en", "dialect")


def test_find_returns_none_for_unregistered():
    assert SubTag.find("en", "region") is None
    st = SubTag.find("EN", "language")
    assert st == SubTag("en", "language")


def test_get_raises_for_unregistered():
    assert SubTag.get("mt", "region").format() == "MT"
    with pytest.raises(SubtagNotFound):
        SubTag.get("en", "region")


def test_equality_and_hash():
    assert SubTag("GB", "region") == SubTag("gb", "region")
    assert SubTag("mt", "region") != SubTag("mt", "language")
    assert len({SubTag("GB", "region"), SubTag("gb", "region")}) == 1


# ---------------------------------------------------------------------------
# record fields
# ---------------------------------------------------------------------------


def test_descriptions():
    assert SubTag("IQ", "region").descriptions() == ["Iraq"]
    assert SubTag("vsv", "extlang").descriptions() == [
        "Valencian Sign Language", "Llengua de signes valenciana"]
    assert SubTag("ro", "language").descriptions() == [
        "Romanian", "Moldavian", "Moldovan"]


def test_preferred_extlang_becomes_language():
    preferred = SubTag("vsv", "extlang").preferred()
    assert preferred is not None
    assert preferred.type() == "language"
    assert preferred.format() == "vsv"


def test_preferred_language():
    # Moldovan -> Romanian
    preferred = SubTag("mo", "language").preferred()
    assert preferred == SubTag("ro", "language")
    assert preferred.format() == "ro"


def test_preferred_region():
    # Burma -> Myanmar
    preferred = SubTag("BU", "region").preferred()
    assert preferred.type() == "region"
    assert preferred.format() == "MM"


def test_preferred_variant():
    preferred = SubTag("heploc", "variant").preferred()
    assert preferred.type() == "variant"
    assert preferred.format() == "alalc97"


def test_preferred_none_without_preferred_value():
    # Latin America and the Caribbean
    assert SubTag("419", "region").preferred() is None


def test_suppressed_script():
    script = SubTag("en", "language").suppressed_script()
    assert script is not None
    assert script.type() == "script"
    assert script.format() == "Latn"
    assert SubTag("en", "language").script() == script

    # a macrolanguage like 'zh' has no suppress-script
    assert SubTag("zh", "language").suppressed_script() is None


def test_scope():
    assert SubTag("zh", "language").scope() == "macrolanguage"
    assert SubTag("nah", "language").scope() == "collection"
    assert SubTag("en", "language").scope() == "individual"
    assert SubTag("IQ", "region").scope() == "individual"


def test_deprecated():
    # German Democratic Republic
    assert SubTag("DD", "region").deprecated() == "1990-10-30"
    assert SubTag("DE", "region").deprecated() is None
    assert SubTag("in", "language").deprecated() == "1989-01-01"


def test_added():
    assert SubTag("DD", "region").added() == "2005-10-16"
    assert SubTag("DG", "region").added() == "2009-07-29"
    assert SubTag("ja", "language").added() == "2005-10-16"


def test_comments():
    # Yugoslavia
    assert SubTag("YU", "region").comments() == [
        "see BA, HR, ME, MK, RS, or SI"]
    assert SubTag("nmf", "language").comments() == ["see ntx"]
    assert SubTag("DE", "region").comments() == []


def test_prefixes_and_macrolanguage():
    assert SubTag("valencia", "variant").prefixes() == ["ca"]
    assert SubTag("en", "language").prefixes() == []
    assert SubTag("1994", "variant").prefixes() == [
        "sl-rozaj", "sl-rozaj-biske", "sl-rozaj-njiva", "sl-rozaj-osojs",
        "sl-rozaj-solba"]
    assert SubTag("cmn", "language").macrolanguage() == \
        SubTag("zh", "language")
    assert SubTag("en", "language").macrolanguage() is None


# ---------------------------------------------------------------------------
# formatting
# ---------------------------------------------------------------------------


def test_format_language():
    assert SubTag("en", "language").format() == "en"
    assert SubTag("EN", "language").format() == "en"


def test_format_region():
    assert SubTag("GB", "region").format() == "GB"
    assert SubTag("gb", "region").format() == "GB"
    assert SubTag("mn", "region").format() == "MN"


def test_format_script():
    assert SubTag("Latn", "script").format() == "Latn"
    assert SubTag("latn", "script").format() == "Latn"
    assert SubTag("cyrl", "script").format() == "Cyrl"
    assert str(SubTag("CYRL", "script")) == "Cyrl"


def test_format_code_works_on_code_points():
    assert format_code("ǆabc", "script") == "ǅabc"
    assert format_code("ab", None) == "ab"


# ---------------------------------------------------------------------------
# classification
# ---------------------------------------------------------------------------


def test_type_predicates():
    assert SubTag.is_language("EN")
    assert not SubTag.is_language("GB")
    assert SubTag.is_extlang("cmn")
    assert SubTag.is_script("hant")
    assert SubTag.is_region("001")
    assert SubTag.is_variant("1996")
    assert not SubTag.is_variant("bumblebee")


def test_scope_predicates():
    assert SubTag.is_collection("cdd")
    assert SubTag.is_macrolanguage("kpe")
    assert SubTag.is_macrolanguage("ZH")
    assert not SubTag.is_macrolanguage("en")
    assert SubTag.is_special("zxx")
    assert SubTag.is_private_use("qaa..qtz")
