class Citation:

    """A reference to a relevant document."""

    __slots__ = ('title', 'url')

    def __init__(self, title, url):
        self.title = title
        self.url = url

    def __str__(self):
        return self.title or self.url

    def __repr__(self):
        return 'Citation(%r, %r)' % (self.title, self.url)

    def __eq__(self, other):
        return isinstance(other, Citation) and \
            self.title == other.title and self.url == other.url

    def __hash__(self):
        return hash((self.title, self.url))


class RFC(Citation):

    """A reference to an RFC document, optionally to a specific section.

    >>> print(RFC(7231, section=(6, 5, 4)).url)
    https://tools.ietf.org/html/rfc7231#section-6.5.4
    """

    __slots__ = ('num', 'section')

    def __init__(self, num, section=None):
        self.num = num = int(num)
        if isinstance(section, tuple):
            section = '.'.join(str(n) for n in section)
        self.section = section = str(section) if section else None
        title = 'RFC\N{NO-BREAK SPACE}%d' % num
        url = 'https://tools.ietf.org/html/rfc%d' % num
        if section:
            title += ' §\N{NO-BREAK SPACE}%s' % section
            url += '#section-%s' % section
        super().__init__(title, url)

    def __repr__(self):
        if self.section:
            return 'RFC(%d, section=%r)' % (self.num, self.section)
        return 'RFC(%d)' % self.num
