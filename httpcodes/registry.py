"""The registry of standard HTTP status codes.

The registry is built once, when this module is imported,
from the table in :mod:`httpcodes.known.status_code`,
and never changes afterwards. All functions here are pure lookups.

>>> lookup_by_code(404).name
'NOT_FOUND'
>>> lookup_by_name('NOT_FOUND').code
StatusCode(404)
"""

from collections import namedtuple
from types import MappingProxyType

from httpcodes.known import status_code
from httpcodes.structure import Category


class NotFound(KeyError):

    """The requested code or name is not in the registry."""

    def __init__(self, key, what='status code'):
        super().__init__(key)
        self.key = key
        self.what = what

    def __str__(self):
        if isinstance(self.key, int) and not isinstance(self.key, bool):
            return 'unknown %s: %d' % (self.what, self.key)
        return 'unknown %s: %s' % (self.what, self.key)


class StatusEntry(namedtuple('StatusEntry', ('code', 'name', 'category',
                                             'description', 'title',
                                             'citations', 'cacheable'))):

    """One row of the registry.

    :attr:`code`, :attr:`name` and :attr:`category` are what callers bind to.
    The rest is documentation: :attr:`title` is the reason phrase
    (such as ``Not Found``), :attr:`citations` is a tuple of
    :class:`~httpcodes.citation.Citation` objects, and :attr:`cacheable`
    is a :class:`~httpcodes.known.status_code.Cacheable` member.
    """

    __slots__ = ()

    def __repr__(self):
        return '<StatusEntry %d %s>' % (self.code, self.name)

    def __str__(self):
        return '%d %s' % (self.code, self.title)


def _build():
    entries = []
    for code in sorted(status_code.known):
        info = status_code.known[code]
        category = Category.for_code(code)
        assert category is not None
        entries.append(StatusEntry(
            code=code,
            name=status_code.known.name_for(code),
            category=category,
            description=info.get('_description', ''),
            title=info['_title'],
            citations=tuple(info.get('_citations', ())),
            cacheable=info.get('cacheable'),
        ))
    return tuple(entries)

_entries = _build()
_by_code = MappingProxyType({entry.code: entry for entry in _entries})
_by_name = MappingProxyType({entry.name: entry for entry in _entries})
_by_category = MappingProxyType({
    category: tuple(entry for entry in _entries
                    if entry.category is category)
    for category in Category
})


def lookup_by_code(code):
    """Return the :class:`StatusEntry` for exactly `code`.

    Raises :exc:`NotFound` if `code` is not a registered status code.
    Only integers are accepted; there is no rounding or nearest match.
    """
    if isinstance(code, int) and not isinstance(code, bool):
        entry = _by_code.get(code)
        if entry is not None:
            return entry
    raise NotFound(code)


def lookup_by_name(name):
    """Return the :class:`StatusEntry` whose symbolic name is `name`.

    The match is exact and case-sensitive.
    """
    entry = _by_name.get(name) if isinstance(name, str) else None
    if entry is None:
        raise NotFound(name, 'status name')
    return entry


def list_by_category(category):
    """Return a tuple of entries in `category`, ascending by code.

    `category` is a :class:`~httpcodes.structure.Category` member
    or its tag, such as ``'ClientError'``.
    """
    resolved = Category.from_tag(category)
    if resolved is None:
        raise NotFound(category, 'status category')
    return _by_category[resolved]


def all_entries():
    return _entries


def get(key, default=None):
    """Like the ``lookup_by_*`` functions, but return `default` if missing.

    `key` can be a code or a name.
    """
    try:
        if isinstance(key, str):
            return lookup_by_name(key)
        return lookup_by_code(key)
    except NotFound:
        return default


def category_of(code):
    """Return the :class:`~httpcodes.structure.Category` of `code`.

    Unlike :func:`lookup_by_code`, this works for any code in the
    100--599 range, so an unregistered ``499`` is still a client error.
    """
    category = Category.for_code(code)
    if category is None:
        raise NotFound(code)
    return category


def describe_category(category):
    resolved = Category.from_tag(category)
    if resolved is None:
        raise NotFound(category, 'status category')
    return status_code.categories[resolved]


def reason(code):
    entry = get(code)
    return entry.title if entry is not None else None


def is_cacheable(code):
    """Whether a response with `code` can be cached heuristically."""
    return status_code.is_cacheable(code) is status_code.Cacheable.by_default
