import io

from httpcodes import registry
from httpcodes.reports.html import html_report
from httpcodes.reports.text import text_report
from httpcodes.structure import Category


def test_text_report():
    buf = io.BytesIO()
    text_report(registry.list_by_category(Category.success), buf)
    out = buf.getvalue().decode('utf-8')
    lines = out.splitlines()
    assert lines[0] == '------------ 2xx success'
    assert lines[1] == '200 OK (OK)'
    assert lines[2] == '    RFC 7231 § 6.3.1; cacheable: by default'
    assert lines[3].startswith('    Standard response')
    assert all(len(line) <= 79 for line in lines)
    assert '226 IM Used (IM_USED)' in out


def test_text_report_empty():
    buf = io.BytesIO()
    text_report([], buf)
    assert buf.getvalue() == b''


def test_html_report():
    buf = io.BytesIO()
    html_report(registry.all_entries(), buf)
    out = buf.getvalue()
    assert out.startswith(b'<!DOCTYPE html>')
    assert out.count(b'<h2>') == 5
    assert out.count(b'class="entry"') == len(registry.all_entries())
    assert b'<code>UNAVAILABLE_FOR_LEGAL_REASONS</code>' in out
    assert b'href="https://tools.ietf.org/html/rfc7725#section-3"' in out
    assert b'id="4xx"' in out
    assert b'id="404"' in out
    assert b'body.report' in out


def test_html_report_codes_are_plain_numbers():
    buf = io.BytesIO()
    html_report([registry.lookup_by_code(404)], buf)
    out = buf.getvalue()
    assert b'<span class="code">404</span>' in out
    assert b'id="404"' in out
    assert b'StatusCode' not in out
