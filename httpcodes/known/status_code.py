import enum

from httpcodes.citation import RFC
from httpcodes.known.base import KnownDict
from httpcodes.structure import Category, StatusCode


class Cacheable(enum.Enum):
    not_at_all = 0
    not_by_default = 1
    by_default = 2


def is_cacheable(code):
    return known.get_info(code).get('cacheable')


# Descriptions of each class as a whole. The codes themselves follow below.
categories = {
    Category.informational: (
        'An informational response indicates that the request was received '
        'and understood. It is issued on a provisional basis while request '
        'processing continues, and alerts the client to wait for a final '
        'response. The message consists only of the status line and '
        'optional header fields, and is terminated by an empty line. As '
        'HTTP/1.0 did not define any 1xx status codes, servers must not '
        'send a 1xx response to an HTTP/1.0 client except under '
        'experimental conditions.'),
    Category.success: (
        'The action requested by the client was received, understood, '
        'and accepted.'),
    Category.redirection: (
        'The client must take additional action to complete the request. '
        'Many of these status codes are used in URL redirection. A user '
        'agent may carry out the additional action with no user '
        'interaction only if the method used in the second request is GET '
        'or HEAD. A user agent should detect and intervene to prevent '
        'cyclical redirects.'),
    Category.client_error: (
        'The error seems to have been caused by the client. Except when '
        'responding to a HEAD request, the server should include an entity '
        'containing an explanation of the error situation, and whether it '
        'is a temporary or permanent condition. These status codes are '
        'applicable to any request method. User agents should display any '
        'included entity to the user.'),
    Category.server_error: (
        'The server failed to fulfill a request. The server is aware that '
        'it has encountered an error or is otherwise incapable of '
        'performing the request. Except when responding to a HEAD request, '
        'the server should include an entity containing an explanation of '
        'the error situation, and indicate whether it is a temporary or '
        'permanent condition. These response codes are applicable to any '
        'request method.'),
}


# When adding a new status code, fill in the fields as follows:
#
#   ``_``, ``_title``, ``_citations``
#     Usually checked against IANA with ``tools/iana.py``.
#
#   ``_name``
#     Only when the identifier differs from the one derived from ``_title``.
#     Names are part of the API: never change or reuse one once published.
#
#   ``cacheable``
#     Whether a response with this code is cacheable by default
#     (RFC 7231 Section 6.1), i.e. can be stored heuristically
#     without explicit freshness information.

known = KnownDict(StatusCode, [
 {'_': StatusCode(100),
  '_citations': [RFC(7231, section=(6, 2, 1))],
  '_title': 'Continue',
  'cacheable': Cacheable.not_at_all,
  '_description': (
      'The server has received the request headers and the client should '
      'proceed to send the request body (in the case of a request for '
      'which a body needs to be sent, for example a POST request). '
      'To have a server check the request headers, a client must send '
      'Expect: 100-continue in its initial request and receive a '
      '100 Continue status code in response before sending the body. '
      'If the client receives an error code such as 403 (Forbidden) or '
      '405 (Method Not Allowed), it should not send the body. The response '
      '417 Expectation Failed indicates that the request should be repeated '
      'without the Expect header, since the server does not support '
      'expectations (this is the case, for example, of HTTP/1.0 servers).')},
 {'_': StatusCode(101),
  '_citations': [RFC(7231, section=(6, 2, 2))],
  '_title': 'Switching Protocols',
  'cacheable': Cacheable.not_at_all,
  '_description': (
      'The requester has asked the server to switch protocols and the '
      'server has agreed to do so.')},
 {'_': StatusCode(102),
  '_citations': [RFC(2518, section=(10, 1))],
  '_title': 'Processing',
  'cacheable': Cacheable.not_at_all,
  '_description': (
      'A WebDAV request may contain many sub-requests involving file '
      'operations, requiring a long time to complete. This code indicates '
      'that the server has received and is processing the request, but no '
      'response is available yet. This prevents the client from timing out '
      'and assuming the request was lost.')},
 {'_': StatusCode(103),
  '_citations': [RFC(8297, section=2)],
  '_title': 'Early Hints',
  'cacheable': Cacheable.not_at_all,
  '_description': (
      'Used to return some response headers before the final HTTP message.')},

 {'_': StatusCode(200),
  '_citations': [RFC(7231, section=(6, 3, 1))],
  '_title': 'OK',
  'cacheable': Cacheable.by_default,
  '_description': (
      'Standard response for successful HTTP requests. The actual response '
      'depends on the request method used. In a GET request, the response '
      'contains an entity corresponding to the requested resource. In a '
      'POST request, the response contains an entity describing or '
      'containing the result of the action.')},
 {'_': StatusCode(201),
  '_citations': [RFC(7231, section=(6, 3, 2))],
  '_title': 'Created',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The request has been fulfilled, resulting in the creation of a new '
      'resource.')},
 {'_': StatusCode(202),
  '_citations': [RFC(7231, section=(6, 3, 3))],
  '_title': 'Accepted',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The request has been accepted for processing, but the processing has '
      'not been completed. The request might or might not be eventually '
      'acted upon, and may be disallowed when processing occurs.')},
 {'_': StatusCode(203),
  '_citations': [RFC(7231, section=(6, 3, 4))],
  '_title': 'Non-Authoritative Information',
  'cacheable': Cacheable.by_default,
  '_description': (
      'The server is a transforming proxy that received a 200 OK from its '
      'origin, but is returning a modified version of the origin\'s '
      'response. Since HTTP/1.1.')},
 {'_': StatusCode(204),
  '_citations': [RFC(7231, section=(6, 3, 5))],
  '_title': 'No Content',
  'cacheable': Cacheable.by_default,
  '_description': (
      'The server successfully processed the request and is not returning '
      'any content.')},
 {'_': StatusCode(205),
  '_citations': [RFC(7231, section=(6, 3, 6))],
  '_title': 'Reset Content',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The server successfully processed the request, but is not returning '
      'any content. Unlike a 204 response, this response requires that the '
      'requester reset the document view.')},
 {'_': StatusCode(206),
  '_citations': [RFC(7233, section=(4, 1))],
  '_title': 'Partial Content',
  'cacheable': Cacheable.by_default,
  '_description': (
      'The server is delivering only part of the resource (byte serving) '
      'due to a Range header sent by the client. The Range header is used '
      'by HTTP clients to enable resuming of interrupted downloads, or to '
      'split a download into multiple simultaneous streams.')},
 {'_': StatusCode(207),
  '_citations': [RFC(4918, section=(11, 1))],
  '_title': 'Multi-Status',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The message body that follows is by default an XML message and can '
      'contain a number of separate response codes, depending on how many '
      'sub-requests were made (WebDAV).')},
 {'_': StatusCode(208),
  '_citations': [RFC(5842, section=(7, 1))],
  '_title': 'Already Reported',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The members of a DAV binding have already been enumerated in a '
      'preceding part of the (multistatus) response, and are not being '
      'included again (WebDAV).')},
 {'_': StatusCode(226),
  '_citations': [RFC(3229, section=(10, 4, 1))],
  '_title': 'IM Used',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The server has fulfilled a request for the resource, and the '
      'response is a representation of the result of one or more '
      'instance-manipulations applied to the current instance.')},

 {'_': StatusCode(300),
  '_citations': [RFC(7231, section=(6, 4, 1))],
  '_title': 'Multiple Choices',
  'cacheable': Cacheable.by_default,
  '_description': (
      'Indicates multiple options for the resource from which the client '
      'may choose (via agent-driven content negotiation). For example, this '
      'code could be used to present multiple video format options, to list '
      'files with different filename extensions, or to suggest word-sense '
      'disambiguation.')},
 {'_': StatusCode(301),
  '_citations': [RFC(7231, section=(6, 4, 2))],
  '_title': 'Moved Permanently',
  'cacheable': Cacheable.by_default,
  '_description': (
      'This and all future requests should be directed to the given URI.')},
 {'_': StatusCode(302),
  '_citations': [RFC(7231, section=(6, 4, 3))],
  '_title': 'Found',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'Tells the client to look at (browse to) another URL. 302 has been '
      'superseded by 303 and 307. HTTP/1.0 (RFC 1945) required the client '
      'to perform a temporary redirect (the original reason phrase was '
      '"Moved Temporarily"), but popular browsers implemented 302 with the '
      'functionality of a 303 See Other. Therefore, HTTP/1.1 added status '
      'codes 303 and 307 to distinguish between the two behaviours. '
      'However, some Web applications and frameworks use the 302 status '
      'code as if it were the 303.')},
 {'_': StatusCode(303),
  '_citations': [RFC(7231, section=(6, 4, 4))],
  '_title': 'See Other',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The response to the request can be found under another URI using '
      'the GET method. When received in response to a POST (or PUT/DELETE), '
      'the client should presume that the server has received the data and '
      'should issue a new GET request to the given URI. Since HTTP/1.1.')},
 {'_': StatusCode(304),
  '_citations': [RFC(7232, section=(4, 1))],
  '_title': 'Not Modified',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'Indicates that the resource has not been modified since the version '
      'specified by the request headers If-Modified-Since or If-None-Match. '
      'In such case, there is no need to retransmit the resource since the '
      'client still has a previously-downloaded copy.')},
 {'_': StatusCode(305),
  '_citations': [RFC(7231, section=(6, 4, 5))],
  '_title': 'Use Proxy',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The requested resource is available only through a proxy, the '
      'address for which is provided in the response. For security reasons, '
      'many HTTP clients do not obey this status code.')},
 {'_': StatusCode(306),
  '_citations': [RFC(7231, section=(6, 4, 6))],
  '_title': 'Switch Proxy',
  'cacheable': Cacheable.not_by_default,
  '_no_sync': True,
  '_description': (
      'No longer used. Originally meant "Subsequent requests should use the '
      'specified proxy."')},
 {'_': StatusCode(307),
  '_citations': [RFC(7231, section=(6, 4, 7))],
  '_title': 'Temporary Redirect',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The request should be repeated with another URI; however, future '
      'requests should still use the original URI. In contrast to how 302 '
      'was historically implemented, the request method is not allowed to '
      'be changed when reissuing the original request. For example, a POST '
      'request should be repeated using another POST request. '
      'Since HTTP/1.1.')},
 {'_': StatusCode(308),
  '_citations': [RFC(7538, section=3)],
  '_title': 'Permanent Redirect',
  'cacheable': Cacheable.by_default,
  '_description': (
      'The request and all future requests should be repeated using another '
      'URI. 307 and 308 parallel the behaviors of 302 and 301, but do not '
      'allow the HTTP method to change. So, for example, submitting a form '
      'to a permanently redirected resource may continue smoothly.')},

 {'_': StatusCode(400),
  '_citations': [RFC(7231, section=(6, 5, 1))],
  '_title': 'Bad Request',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The server cannot or will not process the request due to an apparent '
      'client error (e.g., malformed request syntax, size too large, invalid '
      'request message framing, or deceptive request routing).')},
 {'_': StatusCode(401),
  '_citations': [RFC(7235, section=(3, 1))],
  '_name': 'UNAUTHORISED',
  '_title': 'Unauthorized',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'Similar to 403 Forbidden, but specifically for use when '
      'authentication is required and has failed or has not yet been '
      'provided. The response must include a WWW-Authenticate header field '
      'containing a challenge applicable to the requested resource. '
      '401 semantically means "unauthenticated": the user does not have '
      'valid authentication credentials for the target resource. Some sites '
      'incorrectly issue 401 when an IP address is banned from the website '
      'and that specific address is refused permission to access it.')},
 {'_': StatusCode(402),
  '_citations': [RFC(7231, section=(6, 5, 2))],
  '_title': 'Payment Required',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'Reserved for future use. The original intention was that this code '
      'might be used as part of some form of digital cash or micropayment '
      'scheme, but that has not yet happened, and this code is not usually '
      'used. Some APIs use it when a developer has exceeded a daily limit '
      'on requests, when an account does not have sufficient funds, or for '
      'failed payments where the parameters were correct.')},
 {'_': StatusCode(403),
  '_citations': [RFC(7231, section=(6, 5, 3))],
  '_title': 'Forbidden',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The request contained valid data and was understood by the server, '
      'but the server is refusing action. This may be due to the user not '
      'having the necessary permissions for a resource or needing an '
      'account of some sort, or attempting a prohibited action (e.g. '
      'creating a duplicate record where only one is allowed). This code is '
      'also typically used if the request provided authentication, but the '
      'server did not accept it. The request should not be repeated.')},
 {'_': StatusCode(404),
  '_citations': [RFC(7231, section=(6, 5, 4))],
  '_title': 'Not Found',
  'cacheable': Cacheable.by_default,
  '_description': (
      'The requested resource could not be found but may be available in '
      'the future. Subsequent requests by the client are permissible.')},
 {'_': StatusCode(405),
  '_citations': [RFC(7231, section=(6, 5, 5))],
  '_title': 'Method Not Allowed',
  'cacheable': Cacheable.by_default,
  '_description': (
      'A request method is not supported for the requested resource; for '
      'example, a GET request on a form that requires data to be presented '
      'via POST, or a PUT request on a read-only resource.')},
 {'_': StatusCode(406),
  '_citations': [RFC(7231, section=(6, 5, 6))],
  '_title': 'Not Acceptable',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The requested resource is capable of generating only content not '
      'acceptable according to the Accept headers sent in the request.')},
 {'_': StatusCode(407),
  '_citations': [RFC(7235, section=(3, 2))],
  '_title': 'Proxy Authentication Required',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The client must first authenticate itself with the proxy.')},
 {'_': StatusCode(408),
  '_citations': [RFC(7231, section=(6, 5, 7))],
  '_title': 'Request Timeout',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The server timed out waiting for the request. The client did not '
      'produce a request within the time that the server was prepared to '
      'wait. The client may repeat the request without modifications at any '
      'later time.')},
 {'_': StatusCode(409),
  '_citations': [RFC(7231, section=(6, 5, 8))],
  '_title': 'Conflict',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'Indicates that the request could not be processed because of '
      'conflict in the current state of the resource, such as an edit '
      'conflict between multiple simultaneous updates.')},
 {'_': StatusCode(410),
  '_citations': [RFC(7231, section=(6, 5, 9))],
  '_title': 'Gone',
  'cacheable': Cacheable.by_default,
  '_description': (
      'Indicates that the resource requested is no longer available and '
      'will not be available again. This should be used when a resource has '
      'been intentionally removed and the resource should be purged. Upon '
      'receiving a 410 status code, the client should not request the '
      'resource in the future, and search engines should remove it from '
      'their indices. Most use cases do not require this, and a '
      '404 Not Found may be used instead.')},
 {'_': StatusCode(411),
  '_citations': [RFC(7231, section=(6, 5, 10))],
  '_title': 'Length Required',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The request did not specify the length of its content, which is '
      'required by the requested resource.')},
 {'_': StatusCode(412),
  '_citations': [RFC(7232, section=(4, 2))],
  '_title': 'Precondition Failed',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The server does not meet one of the preconditions that the requester '
      'put on the request header fields.')},
 {'_': StatusCode(413),
  '_citations': [RFC(7231, section=(6, 5, 11))],
  '_title': 'Payload Too Large',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The request is larger than the server is willing or able to process. '
      'Previously called "Request Entity Too Large".')},
 {'_': StatusCode(414),
  '_citations': [RFC(7231, section=(6, 5, 12))],
  '_title': 'URI Too Long',
  'cacheable': Cacheable.by_default,
  '_description': (
      'The URI provided was too long for the server to process. Often the '
      'result of too much data being encoded as a query string of a GET '
      'request, in which case it should be converted to a POST request. '
      'Previously called "Request-URI Too Long".')},
 {'_': StatusCode(415),
  '_citations': [RFC(7231, section=(6, 5, 13))],
  '_title': 'Unsupported Media Type',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The request entity has a media type which the server or resource '
      'does not support. For example, the client uploads an image as '
      'image/svg+xml, but the server requires that images use a different '
      'format.')},
 {'_': StatusCode(416),
  '_citations': [RFC(7233, section=(4, 4))],
  '_title': 'Range Not Satisfiable',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The client has asked for a portion of the file (byte serving), but '
      'the server cannot supply that portion. For example, if the client '
      'asked for a part of the file that lies beyond the end of the file. '
      'Previously called "Requested Range Not Satisfiable".')},
 {'_': StatusCode(417),
  '_citations': [RFC(7231, section=(6, 5, 14))],
  '_title': 'Expectation Failed',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The server cannot meet the requirements of the Expect request header '
      'field.')},
 {'_': StatusCode(418),
  '_citations': [RFC(2324, section=(2, 3, 2)), RFC(7168, section=(2, 3, 3))],
  '_title': "I'm a teapot",
  'cacheable': Cacheable.not_by_default,
  '_no_sync': True,
  '_description': (
      'Defined in 1998 as one of the traditional IETF April Fools\' jokes, '
      'in RFC 2324, Hyper Text Coffee Pot Control Protocol, and not '
      'expected to be implemented by actual HTTP servers. It should be '
      'returned by teapots requested to brew coffee.')},
 {'_': StatusCode(421),
  '_citations': [RFC(7540, section=(9, 1, 2))],
  '_title': 'Misdirected Request',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The request was directed at a server that is not able to produce a '
      'response (for example because of connection reuse).')},
 {'_': StatusCode(422),
  '_citations': [RFC(4918, section=(11, 2))],
  '_name': 'UNPROCESSABLE_ENTRY',
  '_title': 'Unprocessable Entity',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The request was well-formed but was unable to be followed due to '
      'semantic errors (WebDAV).')},
 {'_': StatusCode(423),
  '_citations': [RFC(4918, section=(11, 3))],
  '_title': 'Locked',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The resource that is being accessed is locked (WebDAV).')},
 {'_': StatusCode(424),
  '_citations': [RFC(4918, section=(11, 4))],
  '_title': 'Failed Dependency',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The request failed because it depended on another request and that '
      'request failed (e.g., a PROPPATCH) (WebDAV).')},
 {'_': StatusCode(425),
  '_citations': [RFC(8470, section=(5, 2))],
  '_title': 'Too Early',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'Indicates that the server is unwilling to risk processing a request '
      'that might be replayed.')},
 {'_': StatusCode(426),
  '_citations': [RFC(7231, section=(6, 5, 15))],
  '_title': 'Upgrade Required',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The client should switch to a different protocol such as TLS/1.0, '
      'given in the Upgrade header field.')},
 {'_': StatusCode(428),
  '_citations': [RFC(6585, section=3)],
  '_title': 'Precondition Required',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The origin server requires the request to be conditional. Intended '
      'to prevent the "lost update" problem, where a client GETs a '
      'resource\'s state, modifies it, and PUTs it back to the server, when '
      'meanwhile a third party has modified the state on the server, '
      'leading to a conflict.')},
 {'_': StatusCode(429),
  '_citations': [RFC(6585, section=4)],
  '_title': 'Too Many Requests',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The user has sent too many requests in a given amount of time. '
      'Intended for use with rate-limiting schemes.')},
 {'_': StatusCode(431),
  '_citations': [RFC(6585, section=5)],
  '_title': 'Request Header Fields Too Large',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The server is unwilling to process the request because either an '
      'individual header field, or all the header fields collectively, are '
      'too large.')},
 {'_': StatusCode(451),
  '_citations': [RFC(7725, section=3)],
  '_title': 'Unavailable For Legal Reasons',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'A server operator has received a legal demand to deny access to a '
      'resource or to a set of resources that includes the requested '
      'resource. The code 451 was chosen as a reference to the novel '
      'Fahrenheit 451.')},

 {'_': StatusCode(500),
  '_citations': [RFC(7231, section=(6, 6, 1))],
  '_title': 'Internal Server Error',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'A generic error message, given when an unexpected condition was '
      'encountered and no more specific message is suitable.')},
 {'_': StatusCode(501),
  '_citations': [RFC(7231, section=(6, 6, 2))],
  '_title': 'Not Implemented',
  'cacheable': Cacheable.by_default,
  '_description': (
      'The server either does not recognize the request method, or it lacks '
      'the ability to fulfil the request. Usually this implies future '
      'availability (e.g., a new feature of a web-service API).')},
 {'_': StatusCode(502),
  '_citations': [RFC(7231, section=(6, 6, 3))],
  '_title': 'Bad Gateway',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The server was acting as a gateway or proxy and received an invalid '
      'response from the upstream server.')},
 {'_': StatusCode(503),
  '_citations': [RFC(7231, section=(6, 6, 4))],
  '_title': 'Service Unavailable',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The server cannot handle the request (because it is overloaded or '
      'down for maintenance). Generally, this is a temporary state.')},
 {'_': StatusCode(504),
  '_citations': [RFC(7231, section=(6, 6, 5))],
  '_title': 'Gateway Timeout',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The server was acting as a gateway or proxy and did not receive a '
      'timely response from the upstream server.')},
 {'_': StatusCode(505),
  '_citations': [RFC(7231, section=(6, 6, 6))],
  '_title': 'HTTP Version Not Supported',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The server does not support the HTTP protocol version used in the '
      'request.')},
 {'_': StatusCode(506),
  '_citations': [RFC(2295, section=(8, 1))],
  '_title': 'Variant Also Negotiates',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'Transparent content negotiation for the request results in a '
      'circular reference.')},
 {'_': StatusCode(507),
  '_citations': [RFC(4918, section=(11, 5))],
  '_title': 'Insufficient Storage',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The server is unable to store the representation needed to complete '
      'the request (WebDAV).')},
 {'_': StatusCode(508),
  '_citations': [RFC(5842, section=(7, 2))],
  '_title': 'Loop Detected',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The server detected an infinite loop while processing the request '
      '(sent instead of 208 Already Reported).')},
 {'_': StatusCode(510),
  '_citations': [RFC(2774, section=7)],
  '_title': 'Not Extended',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'Further extensions to the request are required for the server to '
      'fulfil it.')},
 {'_': StatusCode(511),
  '_citations': [RFC(6585, section=6)],
  '_title': 'Network Authentication Required',
  'cacheable': Cacheable.not_by_default,
  '_description': (
      'The client needs to authenticate to gain network access. Intended '
      'for use by intercepting proxies used to control access to the '
      'network (e.g., "captive portals" used to require agreement to Terms '
      'of Service before granting full Internet access via a Wi-Fi '
      'hotspot).')},
 ],
 extra_info=['cacheable']
)
