"""
Download a current copy of the language subtag registry from IANA.

Run as a script to save a fresh copy, then point BCP47TAGS_REGISTRY at it:

    python -m bcp47tags.fetch outfile
"""
import io
import logging
import sys

import requests

from . import config
from .registry import LanguageSubtagRegistry, RegistryError

log = logging.getLogger(__name__)


def fetch_registry(url=config.REGISTRY_URL):
    """Return the registry text, retrying up to MAX_RETRIES times."""
    errors = []
    while True:
        try:
            response = requests.get(url, timeout=config.REQUEST_TIMEOUT)
            response.raise_for_status()
        except requests.RequestException as e:
            errors.append(e)
            log.debug("fetching %s failed (attempt %d): %s",
                      url, len(errors), e)
            if len(errors) == config.MAX_RETRIES:
                raise
        else:
            break

    # the registry is UTF-8 but served as text/plain without a charset
    response.encoding = 'utf-8'
    return response.text


def update_registry(outname, url=config.REGISTRY_URL):
    """
    Fetch the registry and write it to outname.

    The download is parsed before anything is written; return the
    resulting LanguageSubtagRegistry.
    """
    text = fetch_registry(url)
    reg = LanguageSubtagRegistry.load(io.StringIO(text))
    if reg.file_date is None:
        raise RegistryError("{} has no File-Date record".format(url))
    with open(outname, 'w', encoding='utf-8') as outfile:
        outfile.write(text)
    log.debug("wrote registry dated %s to %s", reg.file_date, outname)
    return reg


if __name__ == '__main__':
    if len(sys.argv) != 2:
        print("usage: python -m bcp47tags.fetch outfile")
        sys.exit(1)
    outname = sys.argv[1]
    reg = update_registry(outname)
    print("Wrote registry dated {} to {}: {}".format(
        reg.file_date, outname, reg))
