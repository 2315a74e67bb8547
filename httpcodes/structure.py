"""Classes for representing HTTP status codes and their classes."""

import enum
import functools


@functools.total_ordering
class Category(enum.Enum):

    """The class of a status code, given by its first digit.

    Members are ordered the same way as their codes:

    >>> Category.success < Category.client_error
    True

    """

    informational = 1
    success = 2
    redirection = 3
    client_error = 4
    server_error = 5

    def __lt__(self, other):
        if self.__class__ is other.__class__:
            return self.value < other.value
        return NotImplemented

    @property
    def tag(self):
        """The class name as used in RFC prose, such as ``ClientError``."""
        return ''.join(word.capitalize() for word in self.name.split('_'))

    @property
    def label(self):
        return self.name.replace('_', ' ')

    @classmethod
    def for_code(cls, code):
        """Return the class of any integer `code` in the 100--599 range.

        This works for codes that are not registered, too, so that
        an unknown ``499`` can be treated as a generic client error.
        Outside that range, returns `None`.
        """
        if not isinstance(code, int) or isinstance(code, bool):
            return None
        if not 100 <= code <= 599:
            return None
        return cls(code // 100)

    @classmethod
    def from_tag(cls, tag):
        """Resolve a member by its :attr:`tag` or by its Python name.

        >>> Category.from_tag('ClientError')
        <Category.client_error: 4>
        >>> Category.from_tag('server_error')
        <Category.server_error: 5>
        >>> Category.from_tag('Misc') is None
        True
        """
        if isinstance(tag, cls):
            return tag
        for member in cls:
            if tag in (member.tag, member.name):
                return member
        return None


class StatusCode(int):

    __slots__ = ()

    def __repr__(self):
        return 'StatusCode(%d)' % self

    informational = property(lambda self: 100 <= self <= 199)
    successful = property(lambda self: 200 <= self <= 299)
    redirection = property(lambda self: 300 <= self <= 399)
    client_error = property(lambda self: 400 <= self <= 499)
    server_error = property(lambda self: 500 <= self <= 599)

    @property
    def category(self):
        return Category.for_code(int(self))
