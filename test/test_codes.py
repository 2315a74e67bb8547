from httpcodes import codes
from httpcodes.known import st
from httpcodes.registry import all_entries, list_by_category
from httpcodes.structure import Category, StatusCode


canonical = [
    (100, 'CONTINUE'), (101, 'SWITCHING_PROTOCOLS'), (102, 'PROCESSING'),
    (103, 'EARLY_HINTS'),
    (200, 'OK'), (201, 'CREATED'), (202, 'ACCEPTED'),
    (203, 'NON_AUTHORITATIVE_INFORMATION'), (204, 'NO_CONTENT'),
    (205, 'RESET_CONTENT'), (206, 'PARTIAL_CONTENT'), (207, 'MULTI_STATUS'),
    (208, 'ALREADY_REPORTED'), (226, 'IM_USED'),
    (300, 'MULTIPLE_CHOICES'), (301, 'MOVED_PERMANENTLY'), (302, 'FOUND'),
    (303, 'SEE_OTHER'), (304, 'NOT_MODIFIED'), (305, 'USE_PROXY'),
    (306, 'SWITCH_PROXY'), (307, 'TEMPORARY_REDIRECT'),
    (308, 'PERMANENT_REDIRECT'),
    (400, 'BAD_REQUEST'), (401, 'UNAUTHORISED'), (402, 'PAYMENT_REQUIRED'),
    (403, 'FORBIDDEN'), (404, 'NOT_FOUND'), (405, 'METHOD_NOT_ALLOWED'),
    (406, 'NOT_ACCEPTABLE'), (407, 'PROXY_AUTHENTICATION_REQUIRED'),
    (408, 'REQUEST_TIMEOUT'), (409, 'CONFLICT'), (410, 'GONE'),
    (411, 'LENGTH_REQUIRED'), (412, 'PRECONDITION_FAILED'),
    (413, 'PAYLOAD_TOO_LARGE'), (414, 'URI_TOO_LONG'),
    (415, 'UNSUPPORTED_MEDIA_TYPE'), (416, 'RANGE_NOT_SATISFIABLE'),
    (417, 'EXPECTATION_FAILED'), (418, 'IM_A_TEAPOT'),
    (421, 'MISDIRECTED_REQUEST'), (422, 'UNPROCESSABLE_ENTRY'),
    (423, 'LOCKED'), (424, 'FAILED_DEPENDENCY'), (425, 'TOO_EARLY'),
    (426, 'UPGRADE_REQUIRED'), (428, 'PRECONDITION_REQUIRED'),
    (429, 'TOO_MANY_REQUESTS'), (431, 'REQUEST_HEADER_FIELDS_TOO_LARGE'),
    (451, 'UNAVAILABLE_FOR_LEGAL_REASONS'),
    (500, 'INTERNAL_SERVER_ERROR'), (501, 'NOT_IMPLEMENTED'),
    (502, 'BAD_GATEWAY'), (503, 'SERVICE_UNAVAILABLE'),
    (504, 'GATEWAY_TIMEOUT'), (505, 'HTTP_VERSION_NOT_SUPPORTED'),
    (506, 'VARIANT_ALSO_NEGOTIATES'), (507, 'INSUFFICIENT_STORAGE'),
    (508, 'LOOP_DETECTED'), (510, 'NOT_EXTENDED'),
    (511, 'NETWORK_AUTHENTICATION_REQUIRED'),
]


def test_registry_matches_canonical_table():
    assert [(entry.code, entry.name) for entry in all_entries()] == canonical


def test_constants():
    for code, name in canonical:
        constant = getattr(codes, name)
        assert isinstance(constant, StatusCode)
        assert constant == code
        assert getattr(st, name) == code


def test_no_extra_constants():
    names = set(name for (_, name) in canonical)
    declared = set(name for name in vars(codes)
                   if name.isupper() and
                   isinstance(getattr(codes, name), StatusCode))
    assert declared == names


def test_groupings():
    groupings = {
        Category.informational: codes.INFORMATIONAL,
        Category.success: codes.SUCCESS,
        Category.redirection: codes.REDIRECTION,
        Category.client_error: codes.CLIENT_ERROR,
        Category.server_error: codes.SERVER_ERROR,
    }
    for category, members in groupings.items():
        assert members == frozenset(entry.code
                                    for entry in list_by_category(category))
    assert sum(len(members) for members in groupings.values()) == \
        len(codes.ANY_STATUS)
    assert codes.ANY_STATUS == frozenset(code for (code, _) in canonical)


def test_groupings_are_closed():
    assert codes.NOT_FOUND in codes.CLIENT_ERROR
    assert 404 in codes.CLIENT_ERROR
    assert 499 not in codes.CLIENT_ERROR
    assert 499 not in codes.ANY_STATUS
    assert codes.NOT_FOUND not in codes.SERVER_ERROR
