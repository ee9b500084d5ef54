"""
validlang.py.

Check whether a language tag is well-formed according to BCP47
(https://tools.ietf.org/html/bcp47), i.e. syntactically correct, without
checking that its subtags are registered.
"""
import functools
import re

from .registry import SubtagRecordType, get_registry

# based on http://schneegans.de/lv/

_LANGTAG_PATTERN = """
^
(
  (
    (
      (
        (?P<language23>
          [a-z]{2,3}
        )
        (-
          (?P<extlang>
            [a-z]{3}
          )
        ){0,3}
      )
      |
      (?P<language4>
        [a-z]{4}
      )
      |
      (?P<language58>
        [a-z]{5,8}
      )
    )

    (-(?P<script>
      [a-z]{4}
    ))?

    (-(?P<region>
      [a-z]{2}
      |
      [0-9]{3}
    ))?

    (-
      (?P<variant>
        [a-z0-9]{5,8}
        |
        [0-9][a-z0-9]{3}
      )
    )*

    (-
      (?P<extensions>
        [a-wy-z0-9]
        (-
          [a-z0-9]{2,8}
        )+
      )
    )*

    (-
      x(?P<privateusesubtags>-
        (
          [a-z0-9]{1,8}
        )
      )+
    )?
  )
  |
  (?P<privateusetags>
    x(-
      (
        [a-z0-9]{1,8}
      )
    )+
  )
  |
  (?P<grandfathered>
    {grandfathered}
  )
)
$
"""


@functools.lru_cache(maxsize=None)
def _bcp47_regex(grandfathered):
    alternatives = ' |\n    '.join(re.escape(t) for t in grandfathered)
    # grandfathered tags never appear in an empty registry
    pattern = _LANGTAG_PATTERN.replace('{grandfathered}',
                                       alternatives or '(?!)')
    return re.compile(pattern, re.VERBOSE | re.IGNORECASE)


def well_formed_bcp47(s, registry=None):
    """
    Check whether a language tag is well-formed according to bcp47.

    Return the dict of matched groups, or None if the tag is malformed.
    Grandfathered tags are taken from the registry.
    """
    if registry is None:
        registry = get_registry()
    grandfathered = tuple(sorted(
        rec.tag for rec in
        registry.itertags(SubtagRecordType.Grandfathered)))
    mobj = _bcp47_regex(grandfathered).match(s)
    if mobj is not None:
        return mobj.groupdict()
    return None
