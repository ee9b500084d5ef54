"""
Module-level shortcuts over Tag, SubTag and the registry.

Functions taking a tag accept either a Tag or a string.
"""
from .registry import (MACROLANGUAGE, SUBTAG_TYPES, TAG_TYPES,
                       InvalidMacrolanguage, get_registry, subtag_kind)
from .subtag import LANGUAGE, REGION, SCRIPT, SubTag
from .tag import Tag


def _as_tag(tag):
    if isinstance(tag, Tag):
        return tag
    return Tag(tag)


def tags(tag):
    return Tag(tag)


def check(tag):
    """Return True if the tag is valid.  See errors() for the reasons."""
    return _as_tag(tag).valid()


def errors(tag):
    return _as_tag(tag).errors()


def tag_type(tag):
    return _as_tag(tag).type()


def format_tag(tag):
    return _as_tag(tag).format()


def preferred(tag):
    return _as_tag(tag).preferred()


def grandfathered(tag):
    return _as_tag(tag).grandfathered()


def redundant(tag):
    return _as_tag(tag).redundant()


def types(subtag, all=False):
    """
    Look up the types registered for a code, e.g. ['extlang', 'language']
    for 'xml'.  Returns an empty list for unregistered codes.

    'grandfathered' and 'redundant' are left out unless all is True.
    """
    xtypes = get_registry().types(subtag)
    if not all:
        xtypes = [t for t in xtypes if t not in TAG_TYPES]
    return sorted(xtypes)


def _codes(subtags):
    if isinstance(subtags, str):
        return [subtags]
    return list(subtags)


def subtags(subtags):
    """
    Look up one or more codes, returning a SubTag for every type each
    code is registered under; 'mt' yields both Maltese and Malta.
    Unregistered codes are left out.
    """
    result = []
    for code in _codes(subtags):
        xtypes = types(code)
        for kind in SUBTAG_TYPES:
            if kind in xtypes:
                result.append(SubTag(code, kind))
    return result


def filter(subtags):
    """The opposite of subtags(): return the codes that aren't registered."""
    registry = get_registry()
    return [code for code in _codes(subtags) if not registry.types(code)]


def search(query, all=False):
    """
    Search subtags and tags by description.

    query is either a string, matched case-insensitively anywhere in a
    description, or a compiled regular expression.  For strings, exact
    matches come first.  Grandfathered and redundant tags are only
    searched when all is True.
    """
    if isinstance(query, str):
        needle = query.lower()

        def _matches(desc):
            return needle in desc.lower()

        def _exact(desc):
            return desc.lower() == needle
    else:
        def _matches(desc):
            return query.search(desc) is not None

        def _exact(desc):
            return False

    registry = get_registry()
    exact = []
    partial = []
    candidates = [(rec, SubTag(rec.subtag, rec.rectype))
                  for rec in registry.itersubtags()]
    if all:
        candidates.extend((rec, Tag(rec.tag)) for rec in registry.itertags())
    for rec, result in candidates:
        descriptions = rec.descriptions
        if any(_exact(d) for d in descriptions):
            exact.append(result)
        elif any(_matches(d) for d in descriptions):
            partial.append(result)
    return exact + partial


def languages(macrolanguage):
    """
    Return the subtags belonging to the given macrolanguage, e.g. 'zh'.

    Raises InvalidMacrolanguage if the code isn't a macrolanguage.
    """
    registry = get_registry()
    code = macrolanguage.lower()
    if code not in registry.scope_members(MACROLANGUAGE):
        raise InvalidMacrolanguage(macrolanguage)
    return [SubTag(subtag, kind)
            for subtag, kind in registry.macrolanguage_members(code)]


def type(subtag, kind):
    """
    Get a subtag by type, or None if it isn't registered as that type.

    kind is one of 'language', 'extlang', 'script', 'region' or 'variant';
    use tags() for grandfathered and redundant tags.
    """
    return SubTag.find(subtag, subtag_kind(kind))


def get_subtag(subtag, kind):
    """As type(), but raise SubtagNotFound instead of returning None."""
    return SubTag.get(subtag, kind)


def language(subtag):
    return type(subtag, LANGUAGE)


def region(subtag):
    return type(subtag, REGION)


def script(subtag):
    return type(subtag, SCRIPT)


def date():
    """Return the File-Date of the loaded registry, e.g. '2024-11-19'."""
    return get_registry().file_date
