"""
Single subtags (language, extlang, script, region or variant codes).

See RFC 5646 section 2.2 (http://tools.ietf.org/html/rfc5646#section-2.2)
for the subtag type definitions.
"""
from .registry import (COLLECTION, MACROLANGUAGE, PRIVATE_USE, SPECIAL,
                       SubtagRecordType, get_registry, subtag_kind)

LANGUAGE = SubtagRecordType.Language.value
EXTLANG = SubtagRecordType.Extlang.value
SCRIPT = SubtagRecordType.Script.value
REGION = SubtagRecordType.Region.value
VARIANT = SubtagRecordType.Variant.value

INDIVIDUAL = 'individual'


def format_code(code, kind):
    """
    Apply the RFC 5646 section 2.1.1 case conventions to one code.

    Regions are uppercased ('MN'), scripts get an initial capital ('Cyrl'),
    everything else stays lowercase.
    """
    if kind == REGION:
        return code.upper()
    if kind == SCRIPT:
        return code.capitalize()
    return code


def _has_type(code, kind):
    return kind in get_registry().types(code)


def _has_scope(code, scope):
    return code.lower() in get_registry().scope_members(scope)


class SubTag(object):
    """
    One subtag code and its registry record.

    Constructing a SubTag for an unregistered code is allowed; record is
    then None and the descriptive accessors return empty values.  Use
    find() or get() when the code must be registered.
    """
    def __init__(self, subtag, kind):
        self._subtag = subtag.lower()
        self._kind = subtag_kind(kind)
        self._record = get_registry().lookup_subtag(self._subtag, self._kind)

    @classmethod
    def find(cls, subtag, kind):
        """Return the SubTag if it is registered under kind, else None."""
        st = cls(subtag, kind)
        if st._record is None:
            return None
        return st

    @classmethod
    def get(cls, subtag, kind):
        """Return the SubTag, raising SubtagNotFound if it isn't registered."""
        get_registry().subtag(subtag, kind)
        return cls(subtag, kind)

    @property
    def subtag(self):
        return self._subtag

    @property
    def record(self):
        return self._record

    def type(self):
        return self._kind

    kind = type

    def descriptions(self):
        """
        Return the list of descriptions; a subtag may have more than one,
        e.g. ['Romanian', 'Moldavian', 'Moldovan'] for 'ro'.
        """
        if self._record is None:
            return []
        return self._record.descriptions

    def preferred(self):
        """
        Return the SubTag that replaces this one if it is deprecated.

        Extlang preferred values are always languages; e.g. the preferred
        value of extlang 'cmn' is language 'cmn'.
        """
        if self._record is None or self._record.preferred_value is None:
            return None
        kind = LANGUAGE if self._kind == EXTLANG else self._kind
        return SubTag(self._record.preferred_value, kind)

    def suppressed_script(self):
        """
        Return the language's default script as a SubTag, or None.

        See RFC 5646 section 3.1.9 for Suppress-Script.
        """
        if self._record is None or self._record.suppress_script is None:
            return None
        return SubTag(self._record.suppress_script, SCRIPT)

    script = suppressed_script

    def scope(self):
        """Return the scope, 'individual' for registered subtags without one."""
        if self._record is None:
            return None
        return self._record.scope or INDIVIDUAL

    def deprecated(self):
        if self._record is None:
            return None
        return self._record.deprecated

    def added(self):
        if self._record is None:
            return None
        return self._record.added

    def comments(self):
        if self._record is None:
            return []
        return self._record.comments

    def prefixes(self):
        """Return the Prefix fields of an extlang or variant."""
        if self._record is None:
            return []
        return self._record.prefixes

    def macrolanguage(self):
        """Return the macrolanguage this language belongs to, or None."""
        if self._record is None or self._record.macrolanguage is None:
            return None
        return SubTag(self._record.macrolanguage, LANGUAGE)

    def format(self):
        return format_code(self._subtag, self._kind)

    @staticmethod
    def is_language(subtag):
        return _has_type(subtag, LANGUAGE)

    @staticmethod
    def is_extlang(subtag):
        return _has_type(subtag, EXTLANG)

    @staticmethod
    def is_script(subtag):
        return _has_type(subtag, SCRIPT)

    @staticmethod
    def is_region(subtag):
        return _has_type(subtag, REGION)

    @staticmethod
    def is_variant(subtag):
        return _has_type(subtag, VARIANT)

    @staticmethod
    def is_collection(subtag):
        """
        Check for a collection of languages, e.g. 'cdd' (Caddoan languages).

        Unlike a macrolanguage, a collection can contain languages that are
        only loosely related and cannot be used interchangeably with them.
        """
        return _has_scope(subtag, COLLECTION)

    @staticmethod
    def is_macrolanguage(subtag):
        """Check for an ISO 639-3 macrolanguage, e.g. 'kpe' or 'zh'."""
        return _has_scope(subtag, MACROLANGUAGE)

    @staticmethod
    def is_special(subtag):
        """Check for special codes such as 'und' or 'zxx'."""
        return _has_scope(subtag, SPECIAL)

    @staticmethod
    def is_private_use(subtag):
        return _has_scope(subtag, PRIVATE_USE)

    def __eq__(self, other):
        if not isinstance(other, SubTag):
            return NotImplemented
        return (self._subtag, self._kind) == (other._subtag, other._kind)

    def __hash__(self):
        return hash((self._subtag, self._kind))

    def __str__(self):
        return self.format()

    def __repr__(self):
        return "SubTag({!r}, {!r})".format(self._subtag, self._kind)
