"""
Settings for locating and refreshing the language subtag registry.

The registry file defaults to the complete IANA copy shipped with the
language_data package (the data companion of langcodes); set
BCP47TAGS_REGISTRY to point at another copy (e.g., one downloaded with
python -m bcp47tags.fetch).
"""
import importlib.resources
import os

REGISTRY_PACKAGE = 'language_data'
REGISTRY_RESOURCE = ('data', 'language-subtag-registry.txt')
REGISTRY_ENV_VAR = 'BCP47TAGS_REGISTRY'

REGISTRY_URL = 'https://www.iana.org/assignments/' \
               'language-subtag-registry/language-subtag-registry'
REQUEST_TIMEOUT = 60
MAX_RETRIES = 3

# RFC 5646 caps every extension and private-use subtag at 8 characters
MAX_EXTENSION_LENGTH = 8


def default_registry_file():
    """Return the path of the registry file bundled with language_data."""
    resource = importlib.resources.files(REGISTRY_PACKAGE)
    for part in REGISTRY_RESOURCE:
        resource = resource / part
    return str(resource)


def registry_path():
    """Return the registry file to load, honoring BCP47TAGS_REGISTRY."""
    return os.environ.get(REGISTRY_ENV_VAR) or default_registry_file()
