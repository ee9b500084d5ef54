"""
Interpret and validate BCP 47 language tags against the IANA Language
Subtag Registry.

    >>> import bcp47tags
    >>> bcp47tags.tags('en-gb').format()
    'en-GB'
    >>> bcp47tags.check('mo')
    False
"""
from .api import (check, date, errors, filter, format_tag, get_subtag,
                  grandfathered, language, languages, preferred, redundant,
                  region, script, search, subtags, tag_type, tags, type,
                  types)
from .registry import (InvalidMacrolanguage, LanguageSubtagRegistry,
                       RegistryError, SubtagNotFound, SubtagRecordType,
                       TagNotFound, get_registry, init_registry)
from .subtag import SubTag
from .tag import (ERR_DEPRECATED, ERR_NO_LANGUAGE, ERR_TOO_LONG, ERR_UNKNOWN,
                  Tag, normalize_language_tag)
from .validlang import well_formed_bcp47

__version__ = '0.1.0'
