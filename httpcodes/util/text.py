import io
import re
import textwrap


class WriteIfAny(io.StringIO):

    """
    >>> import sys
    >>> with write_if_any('foo\\n', sys.stdout) as buf:
    ...     pass
    ...
    >>> with write_if_any('foo\\n', sys.stdout) as buf:
    ...     n = buf.write('bar\\n')
    ...
    foo
    bar
    """

    def __init__(self, beginning, parent_file):
        super().__init__()
        self.beginning = beginning
        self.parent_file = parent_file

    def __enter__(self):
        return self

    def __exit__(self, exc_type, _1, _2):
        if exc_type is None:
            value = self.getvalue()
            if value:
                self.parent_file.write(self.beginning + value)
        return False


write_if_any = WriteIfAny


def normalize_whitespace(s):
    """
    >>> print(normalize_whitespace('Efficient XML \\n        Interchange'))
    Efficient XML Interchange
    """
    return re.sub('\\s+', ' ', s).strip()


def indent_paragraph(s, width=79, indent=4):
    """
    >>> print(indent_paragraph('lorem ipsum dolor sit amet', 16, 2))
      lorem ipsum
      dolor sit amet
    """
    prefix = ' ' * indent
    return textwrap.fill(normalize_whitespace(s), width=width,
                         initial_indent=prefix, subsequent_indent=prefix)


def detypographize(s):
    """
    >>> print(detypographize('RFC\\N{NO-BREAK SPACE}7231 \\N{EN DASH} 6.5'))
    RFC 7231 - 6.5
    """
    return (s.
            replace('\N{EN DASH}', '-').
            replace('\N{NO-BREAK SPACE}', ' '))


class MockStdio:

    """Suitable as a mock stdout/stderr for tests."""

    def __init__(self):
        self.buffer = io.BytesIO()

    def write(self, s):
        self.buffer.write(s.encode('utf-8'))
