# read_words
# (word list source)
#

import io
import gzip
import logging
from importlib import resources

from .errors import WordSourceUnavailable

log = logging.getLogger(__name__)

# Path starting with this prefix refers to gzipped word list
# bundled in `xkpasswd.data` package, e.g. "?en.gz"
RESOURCE_PREFIX = '?'
RESOURCE_PACKAGE = 'xkpasswd.data'


def split_lines(lines) -> list:
    """Strip line terminators, keep everything else as is."""
    return [ln.rstrip('\r\n') for ln in lines]


def read_resource(name: str) -> list:
    """Read gzipped word list bundled with the package."""
    log.debug("Reading bundled word list %r", name)
    try:
        with resources.files(RESOURCE_PACKAGE).joinpath(name).open('rb') as raw, \
                gzip.GzipFile(fileobj=raw) as gz, \
                io.TextIOWrapper(gz, encoding='utf-8') as f:
            return split_lines(f)
    except (OSError, EOFError, UnicodeDecodeError) as e:
        raise WordSourceUnavailable(f"Cannot read bundled word list {name!r}: {e}") from e


def read_file(path) -> list:
    """Read word list file, one word per line."""
    log.debug("Reading word list file %r", str(path))
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return split_lines(f)
    except (OSError, UnicodeDecodeError) as e:
        raise WordSourceUnavailable(f"Cannot read word list {str(path)!r}: {e}") from e


def read_words(path) -> list:
    """Read all candidate words from `path`.

    :param path: Filesystem path, or name of bundled resource
                 prefixed by "?".
    :returns: List of words, in order of the source.
    :raises WordSourceUnavailable: The source doesn't exist or can't be read.

    """
    if isinstance(path, str) and path.startswith(RESOURCE_PREFIX):
        return read_resource(path[len(RESOURCE_PREFIX):])
    return read_file(path)
