"""Tabular data about HTTP status codes.

In this package, the term "key" means the actual number in question,
such as ``StatusCode(204)``, whereas "name" means a Python identifier
suitable for attribute access, such as ``NO_CONTENT``.

"""

from httpcodes.known import status_code
from httpcodes.structure import StatusCode


st = status_code.known


def get(obj):
    if isinstance(obj, int) and not isinstance(obj, bool):
        return status_code.known.get_info(StatusCode(obj))
    return {}


def citation(obj):
    citations = get(obj).get('_citations')
    return citations[0] if citations else None


def title(obj, with_citation=False):
    info = get(obj)
    t = info.get('_title')
    if with_citation:
        cite = citation(obj)
        if cite and cite.title:
            if t:
                t = '%s (%s)' % (t, cite.title)
            else:
                t = cite.title
    return t
