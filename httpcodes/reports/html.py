import pkgutil

import dominate
import dominate.tags as H

from httpcodes.__metadata__ import version
from httpcodes.known import status_code
from httpcodes.reports.common import cacheability, group_by_category


css_code = pkgutil.get_data('httpcodes.reports', 'html.css').decode('utf-8')


def html_report(entries, buf):
    """Write an HTML document listing registry entries.

    :param entries:
        An iterable of :class:`~httpcodes.registry.StatusEntry` objects,
        such as the result of :func:`~httpcodes.registry.all_entries`.

    :param buf:
        The file (or file-like object) to which the report will be written.
        It must be opened in binary mode (not text).

    """
    title = 'HTTP status codes'
    document = dominate.document(title=title)
    _common_meta(document)
    with document.body:
        H.attr(_class='report')
    with document:
        H.h1(title)
        for category, group in group_by_category(entries):
            _render_category(category, group)
    buf.write(document.render().encode('utf-8'))


def _common_meta(document):
    with document:
        H.attr(lang='en')
    with document.head:
        H.meta(charset='utf-8')
        H.meta(name='generator', content='httpcodes %s' % version)
        H.style(type='text/css').add_raw_string(css_code)
        H.base(_target='blank')


def _render_category(category, entries):
    # The ``hr`` elements really help readability in w3m.
    H.hr()
    with H.section(_class='category', id='%dxx' % category.value):
        H.h2('%dxx %s' % (category.value, category.label.capitalize()))
        H.p(status_code.categories[category], _class='category-description')
        for entry in entries:
            _render_entry(entry)


def _render_entry(entry):
    with H.div(_class='entry', id='%d' % entry.code):
        with H.h3():
            H.span('%d' % entry.code, _class='code')
            H.span(entry.title, _class='title')
        with H.dl():
            H.dt('Name')
            H.dd(H.code(entry.name))
            if entry.citations:
                H.dt('Defined in')
                with H.dd():
                    for i, cite in enumerate(entry.citations):
                        if i > 0:
                            H.span(', ')
                        H.a(cite.title or cite.url, href=cite.url)
            cacheable = cacheability(entry)
            if cacheable:
                H.dt('Cacheable')
                H.dd(cacheable)
        if entry.description:
            H.p(entry.description, _class='description')
