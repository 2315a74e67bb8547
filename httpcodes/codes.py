"""Named constants for the registered HTTP status codes.

Each constant is a :class:`~httpcodes.structure.StatusCode`,
so it compares equal to the plain integer:

>>> NOT_FOUND == 404
True
>>> NOT_FOUND in CLIENT_ERROR
True

The groupings are closed sets: an integer that is not a registered code
is in none of them, even if its first digit matches.
"""

from httpcodes.structure import StatusCode


CONTINUE = StatusCode(100)
SWITCHING_PROTOCOLS = StatusCode(101)
PROCESSING = StatusCode(102)
EARLY_HINTS = StatusCode(103)

OK = StatusCode(200)
CREATED = StatusCode(201)
ACCEPTED = StatusCode(202)
NON_AUTHORITATIVE_INFORMATION = StatusCode(203)
NO_CONTENT = StatusCode(204)
RESET_CONTENT = StatusCode(205)
PARTIAL_CONTENT = StatusCode(206)
MULTI_STATUS = StatusCode(207)
ALREADY_REPORTED = StatusCode(208)
IM_USED = StatusCode(226)

MULTIPLE_CHOICES = StatusCode(300)
MOVED_PERMANENTLY = StatusCode(301)
FOUND = StatusCode(302)
SEE_OTHER = StatusCode(303)
NOT_MODIFIED = StatusCode(304)
USE_PROXY = StatusCode(305)
SWITCH_PROXY = StatusCode(306)
TEMPORARY_REDIRECT = StatusCode(307)
PERMANENT_REDIRECT = StatusCode(308)

BAD_REQUEST = StatusCode(400)
UNAUTHORISED = StatusCode(401)
PAYMENT_REQUIRED = StatusCode(402)              # reserved
FORBIDDEN = StatusCode(403)
NOT_FOUND = StatusCode(404)
METHOD_NOT_ALLOWED = StatusCode(405)
NOT_ACCEPTABLE = StatusCode(406)
PROXY_AUTHENTICATION_REQUIRED = StatusCode(407)
REQUEST_TIMEOUT = StatusCode(408)
CONFLICT = StatusCode(409)
GONE = StatusCode(410)
LENGTH_REQUIRED = StatusCode(411)
PRECONDITION_FAILED = StatusCode(412)
PAYLOAD_TOO_LARGE = StatusCode(413)
URI_TOO_LONG = StatusCode(414)
UNSUPPORTED_MEDIA_TYPE = StatusCode(415)
RANGE_NOT_SATISFIABLE = StatusCode(416)
EXPECTATION_FAILED = StatusCode(417)
IM_A_TEAPOT = StatusCode(418)
MISDIRECTED_REQUEST = StatusCode(421)
UNPROCESSABLE_ENTRY = StatusCode(422)
LOCKED = StatusCode(423)
FAILED_DEPENDENCY = StatusCode(424)
TOO_EARLY = StatusCode(425)
UPGRADE_REQUIRED = StatusCode(426)
PRECONDITION_REQUIRED = StatusCode(428)
TOO_MANY_REQUESTS = StatusCode(429)
REQUEST_HEADER_FIELDS_TOO_LARGE = StatusCode(431)
UNAVAILABLE_FOR_LEGAL_REASONS = StatusCode(451)

INTERNAL_SERVER_ERROR = StatusCode(500)
NOT_IMPLEMENTED = StatusCode(501)
BAD_GATEWAY = StatusCode(502)
SERVICE_UNAVAILABLE = StatusCode(503)
GATEWAY_TIMEOUT = StatusCode(504)
HTTP_VERSION_NOT_SUPPORTED = StatusCode(505)
VARIANT_ALSO_NEGOTIATES = StatusCode(506)
INSUFFICIENT_STORAGE = StatusCode(507)
LOOP_DETECTED = StatusCode(508)
NOT_EXTENDED = StatusCode(510)
NETWORK_AUTHENTICATION_REQUIRED = StatusCode(511)


INFORMATIONAL = frozenset([
    CONTINUE, SWITCHING_PROTOCOLS, PROCESSING, EARLY_HINTS,
])

SUCCESS = frozenset([
    OK, CREATED, ACCEPTED, NON_AUTHORITATIVE_INFORMATION, NO_CONTENT,
    RESET_CONTENT, PARTIAL_CONTENT, MULTI_STATUS, ALREADY_REPORTED, IM_USED,
])

REDIRECTION = frozenset([
    MULTIPLE_CHOICES, MOVED_PERMANENTLY, FOUND, SEE_OTHER, NOT_MODIFIED,
    USE_PROXY, SWITCH_PROXY, TEMPORARY_REDIRECT, PERMANENT_REDIRECT,
])

CLIENT_ERROR = frozenset([
    BAD_REQUEST, UNAUTHORISED, PAYMENT_REQUIRED, FORBIDDEN, NOT_FOUND,
    METHOD_NOT_ALLOWED, NOT_ACCEPTABLE, PROXY_AUTHENTICATION_REQUIRED,
    REQUEST_TIMEOUT, CONFLICT, GONE, LENGTH_REQUIRED, PRECONDITION_FAILED,
    PAYLOAD_TOO_LARGE, URI_TOO_LONG, UNSUPPORTED_MEDIA_TYPE,
    RANGE_NOT_SATISFIABLE, EXPECTATION_FAILED, IM_A_TEAPOT,
    MISDIRECTED_REQUEST, UNPROCESSABLE_ENTRY, LOCKED, FAILED_DEPENDENCY,
    TOO_EARLY, UPGRADE_REQUIRED, PRECONDITION_REQUIRED, TOO_MANY_REQUESTS,
    REQUEST_HEADER_FIELDS_TOO_LARGE, UNAVAILABLE_FOR_LEGAL_REASONS,
])

SERVER_ERROR = frozenset([
    INTERNAL_SERVER_ERROR, NOT_IMPLEMENTED, BAD_GATEWAY, SERVICE_UNAVAILABLE,
    GATEWAY_TIMEOUT, HTTP_VERSION_NOT_SUPPORTED, VARIANT_ALSO_NEGOTIATES,
    INSUFFICIENT_STORAGE, LOOP_DETECTED, NOT_EXTENDED,
    NETWORK_AUTHENTICATION_REQUIRED,
])

ANY_STATUS = INFORMATIONAL | SUCCESS | REDIRECTION | CLIENT_ERROR | \
    SERVER_ERROR
