"""
Full language tags such as 'en-GB', 'az-Arab' or 'zh-cmn-Hant'.

A tag is either an ordinary tag, decomposed into subtags by position and
length, or a whole-tag registry entry (grandfathered or redundant).  See
RFC 5646 section 2.2.8 for grandfathered and redundant tags.
"""
from . import config
from .registry import SubtagRecordType, get_registry
from .subtag import (EXTLANG, LANGUAGE, REGION, SCRIPT, VARIANT, SubTag,
                     format_code)
from .validlang import well_formed_bcp47

GRANDFATHERED = SubtagRecordType.Grandfathered.value
REDUNDANT = SubtagRecordType.Redundant.value
TAG = 'tag'

ERR_DEPRECATED = 'ERR_DEPRECATED'
ERR_NO_LANGUAGE = 'ERR_NO_LANGUAGE'
ERR_UNKNOWN = 'ERR_UNKNOWN'
ERR_TOO_LONG = 'ERR_TOO_LONG'

PRIVATE_USE_SINGLETON = 'x'

# Language subtags may only appear at the beginning of the tag; elsewhere
# the type is guessed from the code length, most likely type first:
#   2: a region, or a language in the wrong place
#   3: a numeric region such as '001', an extlang, or a misplaced language
#   4: a numeric variant such as '1996', or a script
_LEADING_KINDS = (LANGUAGE,)
_KINDS_BY_LENGTH = {
    2: (REGION, LANGUAGE),
    3: (REGION, EXTLANG, LANGUAGE),
    4: (VARIANT, SCRIPT),
}
_DEFAULT_KINDS = (VARIANT,)

_FORMAT_KIND_BY_LENGTH = {2: REGION, 4: SCRIPT}


def normalize_language_tag(s):
    """
    Attempt to modify language tag content to get it into the expected form.

    RFC5646 requires -, but many sites use _ or / instead.
    """
    return s.replace('_', '-').replace('/', '-')


def _candidate_kinds(index, code):
    if index == 0:
        return _LEADING_KINDS
    return _KINDS_BY_LENGTH.get(len(code), _DEFAULT_KINDS)


def _is_singleton(code):
    return len(code) < 2


class Tag(object):
    """A language tag, possibly registered as grandfathered or redundant."""
    def __init__(self, tag, normalize=False):
        tag = tag.strip()
        if normalize:
            tag = normalize_language_tag(tag)
        self._tag = tag.lower()
        self._record = get_registry().lookup_tag(self._tag)

    @property
    def tag(self):
        return self._tag

    @property
    def record(self):
        return self._record

    def _codes(self):
        return self._tag.split('-')

    def subtags(self):
        """
        Return the subtags making up the tag, in order.

        Grandfathered tags have no subtags.  Codes that can't be matched to
        a registered subtag are skipped, and nothing from the first
        singleton onwards (extensions, private use) is included.
        """
        if self.grandfathered():
            return []

        subtags = []
        for index, code in enumerate(self._codes()):
            if _is_singleton(code):
                break
            for kind in _candidate_kinds(index, code):
                subtag = SubTag.find(code, kind)
                if subtag is not None:
                    subtags.append(subtag)
                    break
        return subtags

    def find(self, kind):
        """Return the first subtag of the given type, or None."""
        kind = SubtagRecordType.fromstr(kind).value
        for subtag in self.subtags():
            if subtag.type() == kind:
                return subtag
        return None

    def language(self):
        return self.find(LANGUAGE)

    def region(self):
        return self.find(REGION)

    def script(self):
        return self.find(SCRIPT)

    def private(self):
        """Return the private use codes following an 'x' singleton."""
        codes = self._codes()
        if PRIVATE_USE_SINGLETON not in codes:
            return []
        return codes[codes.index(PRIVATE_USE_SINGLETON) + 1:]

    def type(self):
        """Return 'grandfathered', 'redundant', or 'tag' for anything else."""
        if self._record is None:
            return TAG
        return self._record.rectype

    def grandfathered(self):
        return self.type() == GRANDFATHERED

    def redundant(self):
        return self.type() == REDUNDANT

    def preferred(self):
        """
        Return the preferred Tag for a deprecated or redundant tag, or None.

        e.g. Tag('zh-cmn-Hant').preferred() formats as 'cmn-Hant'.
        """
        if self._record is None or self._record.preferred_value is None:
            return None
        return Tag(self._record.preferred_value)

    def added(self):
        if self._record is None:
            return None
        return self._record.added

    def deprecated(self):
        if self._record is None:
            return None
        return self._record.deprecated

    def descriptions(self):
        if self._record is None:
            return []
        return self._record.descriptions

    def errors(self):
        """
        Return the list of validation error codes; empty for a valid tag.

        A deprecated grandfathered or redundant tag only reports
        ERR_DEPRECATED.  Grandfathered tags have no subtags, so any other
        grandfathered tag reports ERR_NO_LANGUAGE.
        Duplicate subtags, subtag order and scripts made redundant by
        Suppress-Script are not checked.
        """
        if self._record is not None and self._record.deprecated:
            return [ERR_DEPRECATED]

        errors = []

        def _error(err):
            if err not in errors:
                errors.append(err)

        registry = get_registry()
        codes = self._codes()
        for index, code in enumerate(codes):
            if _is_singleton(code):
                # extension and private use subtags are only length-checked
                if any(len(c) > config.MAX_EXTENSION_LENGTH
                       for c in codes[index:]):
                    _error(ERR_TOO_LONG)
                break
            if not registry.types(code):
                _error(ERR_UNKNOWN)

        subtags = self.subtags()
        if not subtags or subtags[0].type() != LANGUAGE:
            _error(ERR_NO_LANGUAGE)
        if any(subtag.deprecated() for subtag in subtags):
            _error(ERR_DEPRECATED)
        return errors

    def valid(self):
        return self.errors() == []

    def well_formed(self):
        """Check the tag against the RFC 5646 syntax only."""
        return well_formed_bcp47(self._tag) is not None

    def format(self):
        """
        Format the tag according to the case conventions of RFC 5646
        section 2.1.1, e.g. 'en-gb-oed' -> 'en-GB-oed'.

        Everything after a singleton is left as is.
        """
        codes = self._codes()
        formatted = codes[:1]
        for index in range(1, len(codes)):
            if len(formatted[-1]) == 1:
                formatted.extend(codes[index:])
                break
            code = codes[index]
            formatted.append(
                format_code(code, _FORMAT_KIND_BY_LENGTH.get(len(code))))
        return '-'.join(formatted)

    def __len__(self):
        return len(self.subtags())

    def __bool__(self):
        return True

    def __iter__(self):
        return iter(self.subtags())

    def __getitem__(self, index):
        return self.subtags()[index]

    def __eq__(self, other):
        if not isinstance(other, Tag):
            return NotImplemented
        return self._tag == other._tag

    def __hash__(self):
        return hash(self._tag)

    def __str__(self):
        return self.format()

    def __repr__(self):
        return "Tag({!r})".format(self._tag)
