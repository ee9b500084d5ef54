"""
registry.py.

Load the IANA Language Subtag Registry
(https://www.iana.org/assignments/language-subtag-registry) into read-only
lookup indices.  The registry is a "record-jar" file described in
RFC 5646 section 3.1: records separated by lines containing only "%%",
one "Key: Value" field per line.
"""
import enum
import itertools
import logging
import os
import threading
from collections import defaultdict
from types import MappingProxyType

from . import config

log = logging.getLogger(__name__)

RECORD_SEPARATOR = '%%'

# Fields that may repeat within one record; all others keep the last value.
_MULTI_VALUED_FIELDS = ('Description', 'Comments', 'Prefix')

# Case is only a formatting convention, so codes and types are lowercased.
_LOWERCASED_FIELDS = ('Tag', 'Subtag', 'Type')

COLLECTION = 'collection'
MACROLANGUAGE = 'macrolanguage'
SPECIAL = 'special'
PRIVATE_USE = 'private-use'
SCOPES = (COLLECTION, MACROLANGUAGE, SPECIAL, PRIVATE_USE)


class RegistryError(Exception):
    """Base class for errors raised by registry lookups."""


class SubtagNotFound(RegistryError, LookupError):
    def __init__(self, subtag, kind):
        super().__init__(
            "non-existent subtag '{}' of type '{}'.".format(subtag, kind))
        self.subtag = subtag
        self.kind = kind


class TagNotFound(RegistryError, LookupError):
    def __init__(self, tag):
        super().__init__("non-existent tag '{}'.".format(tag))
        self.tag = tag


class InvalidMacrolanguage(RegistryError, ValueError):
    def __init__(self, subtag):
        super().__init__("'{}' is not a valid macrolanguage.".format(subtag))
        self.subtag = subtag


class SubtagRecordType(str, enum.Enum):
    Language = 'language'
    Extlang = 'extlang'
    Script = 'script'
    Region = 'region'
    Variant = 'variant'
    Grandfathered = 'grandfathered'
    Redundant = 'redundant'

    @property
    def is_subtag(self):
        return self not in (SubtagRecordType.Grandfathered,
                            SubtagRecordType.Redundant)

    @staticmethod
    def fromstr(s):
        if isinstance(s, SubtagRecordType):
            return s
        s = str(s).lower()
        for rectype in SubtagRecordType:
            if rectype.value == s:
                return rectype
        raise ValueError("Invalid subtag record type {}".format(s))


SUBTAG_TYPES = tuple(t.value for t in SubtagRecordType if t.is_subtag)
TAG_TYPES = tuple(t.value for t in SubtagRecordType if not t.is_subtag)


def subtag_kind(kind):
    """Normalize a kind name, rejecting the whole-tag kinds."""
    rectype = SubtagRecordType.fromstr(kind)
    if not rectype.is_subtag:
        raise ValueError(
            'invalid type for subtag {}, expected: "language", "extlang", '
            '"script", "region" or "variant"'.format(rectype.value))
    return rectype.value


class _RegistryRecord(object):
    """Fields shared by subtag and whole-tag records."""
    def __init__(self, rec):
        self._fields = MappingProxyType(dict(rec))
        self._type = rec['Type']
        self._descriptions = tuple(rec.get('Description', ()))
        self._comments = tuple(rec.get('Comments', ()))

    @property
    def rectype(self):
        return self._type

    @property
    def descriptions(self):
        return list(self._descriptions)

    @property
    def added(self):
        return self._fields.get('Added')

    @property
    def deprecated(self):
        return self._fields.get('Deprecated')

    @property
    def preferred_value(self):
        return self._fields.get('Preferred-Value')

    @property
    def comments(self):
        return list(self._comments)

    @property
    def fields(self):
        """All raw fields of the record, read-only."""
        return self._fields


class SubtagRecord(_RegistryRecord):
    def __init__(self, rec):
        super().__init__(rec)
        self._subtag = rec['Subtag']

    @property
    def subtag(self):
        return self._subtag

    @property
    def suppress_script(self):
        return self._fields.get('Suppress-Script')

    @property
    def scope(self):
        return self._fields.get('Scope')

    @property
    def macrolanguage(self):
        return self._fields.get('Macrolanguage')

    @property
    def prefixes(self):
        return list(self._fields.get('Prefix', ()))

    def __str__(self):
        return "{} {} ({})".format(
            self._subtag, self._descriptions, self._type)


class TagRecord(_RegistryRecord):
    def __init__(self, rec):
        super().__init__(rec)
        self._tag = rec['Tag']

    @property
    def tag(self):
        return self._tag

    def __str__(self):
        return "{} {} ({})".format(self._tag, self._descriptions, self._type)


class _IndexBuilder(object):
    """Accumulates classified records; frozen into a registry at the end."""
    def __init__(self):
        self.file_date = None
        self.subtags = {}
        self.tags = {}
        self.types = defaultdict(set)
        self.scopes = defaultdict(set)
        self.macrolanguages = defaultdict(list)

    def add(self, rec):
        if 'File-Date' in rec:
            self.file_date = rec['File-Date']
        elif 'Subtag' in rec and 'Type' in rec:
            subtag, xtype = rec['Subtag'], rec['Type']
            self.subtags[(subtag, xtype)] = SubtagRecord(rec)
            self.types[subtag].add(xtype)
            if xtype in ('language', 'extlang') and 'Scope' in rec:
                self.scopes[rec['Scope']].add(subtag)
            if 'Macrolanguage' in rec:
                self.macrolanguages[rec['Macrolanguage'].lower()].append(
                    (subtag, xtype))
        elif 'Tag' in rec and 'Type' in rec:
            tag, xtype = rec['Tag'], rec['Type']
            self.tags[tag] = TagRecord(rec)
            self.types[tag].add(xtype)

    def freeze(self):
        reg = LanguageSubtagRegistry()
        reg._file_date = self.file_date
        reg._subtags = MappingProxyType(self.subtags)
        reg._tags = MappingProxyType(self.tags)
        reg._types = MappingProxyType(
            {k: frozenset(v) for k, v in self.types.items()})
        reg._scopes = MappingProxyType(
            {k: frozenset(v) for k, v in self.scopes.items()})
        reg._macrolanguages = MappingProxyType(
            {k: tuple(v) for k, v in self.macrolanguages.items()})
        return reg


class LanguageSubtagRegistry(object):
    """Read-only indices over one copy of the registry file."""
    def __init__(self):
        self._file_date = None
        self._subtags = MappingProxyType({})
        self._tags = MappingProxyType({})
        self._types = MappingProxyType({})
        self._scopes = MappingProxyType({})
        self._macrolanguages = MappingProxyType({})

    @property
    def file_date(self):
        return self._file_date

    def lookup_subtag(self, subtag, kind):
        """
        Get the record for a subtag of the given type (e.g., 'en', 'language').

        Return None if the subtag isn't registered under that type.
        """
        return self._subtags.get((subtag.lower(), subtag_kind(kind)), None)

    def subtag(self, subtag, kind):
        """As lookup_subtag, but raise SubtagNotFound for unknown subtags."""
        rec = self.lookup_subtag(subtag, kind)
        if rec is None:
            raise SubtagNotFound(subtag.lower(), subtag_kind(kind))
        return rec

    def lookup_tag(self, tag):
        """Get the grandfathered or redundant record for a whole tag, or None."""
        return self._tags.get(tag.lower(), None)

    def tag(self, tag):
        rec = self.lookup_tag(tag)
        if rec is None:
            raise TagNotFound(tag.lower())
        return rec

    def types(self, code):
        """Return the set of types a code is registered under."""
        return self._types.get(code.lower(), frozenset())

    def scope_members(self, scope):
        return self._scopes.get(scope, frozenset())

    def macrolanguage_members(self, subtag):
        """(subtag, type) pairs of every record naming subtag as its macrolanguage."""
        return list(self._macrolanguages.get(subtag.lower(), ()))

    def itersubtags(self, kind=None):
        """Iterate over subtag records in registry order, optionally by type."""
        if kind is not None:
            kind = subtag_kind(kind)
        for (_, xtype), rec in self._subtags.items():
            if kind is None or xtype == kind:
                yield rec

    def itertags(self, kind=None):
        if kind is not None:
            kind = SubtagRecordType.fromstr(kind).value
        for rec in self._tags.values():
            if kind is None or rec.rectype == kind:
                yield rec

    def __contains__(self, code):
        """Check whether the code is registered as any kind of (sub)tag"""
        return bool(self.types(code))

    def __str__(self):
        counts = defaultdict(int)
        for xtypes in self._types.values():
            for xtype in xtypes:
                counts[xtype] += 1
        return ', '.join("{}: {}".format(rectype.name, counts[rectype.value])
                         for rectype in SubtagRecordType)

    @staticmethod
    def load(infile=None):
        """
        Build a registry from a file name or an iterable of lines.

        With no argument the configured registry file is read
        (see config.registry_path).
        """
        if infile is None:
            infile = config.registry_path()
        if isinstance(infile, (str, os.PathLike)):
            with open(infile, encoding='utf-8') as inp:
                reg = LanguageSubtagRegistry._load_lines(inp)
            log.debug("loaded %s from %s", reg, infile)
            return reg
        return LanguageSubtagRegistry._load_lines(infile)

    @staticmethod
    def _load_lines(lines):
        builder = _IndexBuilder()
        rec = {}
        # the last record has no separator after it
        for line in itertools.chain(lines, [RECORD_SEPARATOR]):
            if isinstance(line, bytes):
                line = line.decode('utf-8')
            indented = line[:1].isspace()
            line = line.strip()
            if not line:
                continue
            if line == RECORD_SEPARATOR:
                builder.add(rec)
                rec = {}
                continue

            key, sep, val = line.partition(': ')
            if indented or not sep:
                # continuation line
                rec.setdefault('Comments', []).append(line)
            elif key in _MULTI_VALUED_FIELDS:
                rec.setdefault(key, []).append(val)
            elif key in _LOWERCASED_FIELDS:
                rec[key] = val.lower()
            else:
                rec[key] = val
        return builder.freeze()


_registry = None
_registry_lock = threading.Lock()


def get_registry():
    """Return the process-wide registry, loading it on first use."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = LanguageSubtagRegistry.load()
    return _registry


def init_registry(infile=None):
    """
    Explicitly build the process-wide registry from infile.

    May only be called before anything has used the registry.
    """
    global _registry
    with _registry_lock:
        if _registry is not None:
            raise RegistryError("language subtag registry already initialized")
        _registry = LanguageSubtagRegistry.load(infile)
    return _registry
