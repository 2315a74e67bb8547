from httpcodes import codes
from httpcodes.__metadata__ import version as __version__
from httpcodes.registry import (NotFound, StatusEntry, all_entries,
                                category_of, describe_category, get,
                                is_cacheable, list_by_category,
                                lookup_by_code, lookup_by_name, reason)
from httpcodes.reports.html import html_report
from httpcodes.reports.text import text_report
from httpcodes.structure import Category, StatusCode

__all__ = [
    'Category',
    'NotFound',
    'StatusCode',
    'StatusEntry',
    'all_entries',
    'category_of',
    'codes',
    'describe_category',
    'get',
    'html_report',
    'is_cacheable',
    'list_by_category',
    'lookup_by_code',
    'lookup_by_name',
    'reason',
    'text_report',
]
