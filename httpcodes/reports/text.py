import codecs

from httpcodes.reports.common import cacheability, group_by_category
from httpcodes.util.text import (detypographize, indent_paragraph,
                                 write_if_any)


def text_report(entries, buf):
    """Write a plain-text listing of registry entries.

    :param entries:
        An iterable of :class:`~httpcodes.registry.StatusEntry` objects,
        such as the result of :func:`~httpcodes.registry.all_entries`.

    :param buf:
        The file (or file-like object) to which the report will be written.
        It must be opened in binary mode (not text).

    """
    f1 = codecs.getwriter('utf-8')(buf)
    for category, group in group_by_category(entries):
        with write_if_any(_category_marker(category), f1) as f2:
            for entry in group:
                _write_entry(entry, f2)


def _category_marker(category):
    return '------------ %dxx %s\n' % (category.value, category.label)


def _write_entry(entry, f):
    f.write('%d %s (%s)\n' % (entry.code, entry.title, entry.name))
    details = [detypographize(str(cite)) for cite in entry.citations]
    cacheable = cacheability(entry)
    if cacheable:
        details.append('cacheable: %s' % cacheable)
    if details:
        f.write('    %s\n' % '; '.join(details))
    if entry.description:
        f.write(indent_paragraph(entry.description) + '\n')
