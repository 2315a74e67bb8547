#!/usr/bin/env python
"""Tool to check :mod:`httpcodes.known.status_code` against IANA.

Simply run::

  $ tools/iana.py

and it will fetch the HTTP Status Code Registry from IANA,
compare it with the table in :mod:`httpcodes.known.status_code`,
and print the differences. The table itself is edited by hand.

Codes that are in httpcodes but not registered with IANA
(such as ``418 I'm a teapot``) are reported too,
unless their entry has ``_no_sync`` set.

"""

import re
import sys
from urllib.parse import urljoin
from urllib.request import Request, urlopen

import lxml.etree

from httpcodes.citation import RFC, Citation
from httpcodes.known import status_code
from httpcodes.structure import StatusCode
from httpcodes.util.text import normalize_whitespace


class StatusCodeRegistry:

    xmlns = {'iana': 'http://www.iana.org/assignments'}
    relative_url = 'http-status-codes/http-status-codes.xml'

    def __init__(self, base_url='https://www.iana.org/assignments/'):
        self.base_url = base_url

    def get_all(self):
        tree = self._get_xml(self.relative_url)
        entries = []
        for record in tree.findall('//iana:record', self.xmlns):
            entry = self._from_record(record)
            if entry:
                entries.append(entry)
        return entries

    def _get_xml(self, relative_url):
        req = Request(
            urljoin(self.base_url, relative_url),
            headers={'Accept': 'text/xml, application/xml',
                     'User-Agent': 'httpcodes-IANA-tool Python-urllib'})
        return lxml.etree.parse(urlopen(req))

    def _from_record(self, record):
        value = record.find('iana:value', self.xmlns).text
        if not value.isdigit():
            return None
        description = record.find('iana:description', self.xmlns).text
        if description.lower() in ['unassigned', '(unused)']:
            return None
        return {
            '_': StatusCode(value),
            '_citations': [self.extract_citation(record)],
            '_title': normalize_whitespace(description),
        }

    def extract_citation(self, record):
        for xref in record.findall('iana:xref', self.xmlns):
            if xref.get('type') == 'rfc':
                match = re.search(r'RFC(\d+), Section ([0-9]+(\.[0-9]+)*)',
                                  xref.text or '')
                if match:
                    return RFC(int(match.group(1)), section=match.group(2))
                return RFC(int(xref.get('data')[3:]))
            elif xref.get('type') == 'uri':
                title = normalize_whitespace(xref.text) if xref.text else None
                return Citation(title, xref.get('data'))
        return None


def compare(ours, theirs):
    """Yield human-readable lines describing the differences."""
    theirs_by_key = {entry['_']: entry for entry in theirs}
    for key in sorted(set(ours) | set(theirs_by_key)):
        info = ours.get_info(key)
        if key not in theirs_by_key:
            if not info.get('_no_sync'):
                yield '%d: not registered with IANA' % key
            continue
        their = theirs_by_key[key]
        if not info:
            yield '%d: missing, IANA has %r' % (key, their['_title'])
            continue
        if info.get('_no_sync'):
            continue
        if info['_title'] != their['_title']:
            yield '%d: title %r, IANA has %r' % (key, info['_title'],
                                                 their['_title'])
        their_cite = their['_citations'][0]
        if their_cite is not None and \
                their_cite not in info.get('_citations', []):
            yield '%d: IANA cites %s' % (key, their_cite.url)


def main():
    diffs = list(compare(status_code.known, StatusCodeRegistry().get_all()))
    for line in diffs:
        print(line)
    return 1 if diffs else 0


if __name__ == '__main__':
    sys.exit(main())
