"""Named HTTP status constants with their registered reason phrases.

Every constant is an immutable ``HTTPStatus`` built once at import. The
annotation on each one carries the literal code and phrase so editors and
type checkers show the exact pair at the point of use.
"""

from __future__ import annotations

from typing import Final, Literal

from .domain.models import HTTPStatus, new_http_status

# 1xx Informational

CONTINUE: Final[HTTPStatus[Literal[100], Literal["Continue"]]] = new_http_status(
    100, "Continue"
)
"""100 Continue: the client should continue the request, or ignore this if done."""

SWITCHING_PROTOCOLS: Final[
    HTTPStatus[Literal[101], Literal["Switching Protocols"]]
] = new_http_status(101, "Switching Protocols")
"""101 Switching Protocols: reply to an ``Upgrade`` request header.

Names the protocol the server is switching to.
"""

PROCESSING: Final[HTTPStatus[Literal[102], Literal["Processing"]]] = new_http_status(
    102, "Processing"
)
"""102 Processing (deprecated, WebDAV): request received, no status available yet."""

EARLY_HINTS: Final[HTTPStatus[Literal[103], Literal["Early Hints"]]] = (
    new_http_status(103, "Early Hints")
)
"""103 Early Hints: lets the user agent preload or preconnect via ``Link`` headers
while the server prepares the final response."""

# 2xx Success

OK: Final[HTTPStatus[Literal[200], Literal["OK"]]] = new_http_status(200, "OK")
"""200 OK: the request succeeded.

The meaning of success depends on the method: GET transmits the resource in
the body, HEAD sends representation headers only, PUT or POST describe the
result of the action, TRACE echoes the request as received.
"""

CREATED: Final[HTTPStatus[Literal[201], Literal["Created"]]] = new_http_status(
    201, "Created"
)
"""201 Created: the request succeeded and a new resource was created."""

ACCEPTED: Final[HTTPStatus[Literal[202], Literal["Accepted"]]] = new_http_status(
    202, "Accepted"
)
"""202 Accepted: received but not yet acted upon; the outcome is not reported."""

NON_AUTHORITATIVE_INFORMATION: Final[
    HTTPStatus[Literal[203], Literal["Non-Authoritative Information"]]
] = new_http_status(203, "Non-Authoritative Information")
"""203 Non-Authoritative Information: metadata came from a local or third-party copy.

Mostly used by mirrors or backups; ``200 OK`` is preferred otherwise.
"""

NO_CONTENT: Final[HTTPStatus[Literal[204], Literal["No Content"]]] = new_http_status(
    204, "No Content"
)
"""204 No Content: nothing to send, but the headers are useful."""

RESET_CONTENT: Final[HTTPStatus[Literal[205], Literal["Reset Content"]]] = (
    new_http_status(205, "Reset Content")
)
"""205 Reset Content: the user agent should reset the document that sent the request."""

PARTIAL_CONTENT: Final[HTTPStatus[Literal[206], Literal["Partial Content"]]] = (
    new_http_status(206, "Partial Content")
)
"""206 Partial Content: reply to a range request for part of a resource."""

MULTI_STATUS: Final[HTTPStatus[Literal[207], Literal["Multi-Status"]]] = (
    new_http_status(207, "Multi-Status")
)
"""207 Multi-Status (WebDAV): information about multiple resources."""

ALREADY_REPORTED: Final[HTTPStatus[Literal[208], Literal["Already Reported"]]] = (
    new_http_status(208, "Already Reported")
)
"""208 Already Reported (WebDAV): avoids enumerating the same binding twice in a
``<dav:propstat>`` element."""

IM_USED: Final[HTTPStatus[Literal[226], Literal["IM Used"]]] = new_http_status(
    226, "IM Used"
)
"""226 IM Used (delta encoding): result of instance-manipulations on a GET."""

# 3xx Redirection

MULTIPLE_CHOICES: Final[HTTPStatus[Literal[300], Literal["Multiple Choices"]]] = (
    new_http_status(300, "Multiple Choices")
)
"""300 Multiple Choices: more than one possible response; the agent should pick one."""

MOVED_PERMANENTLY: Final[HTTPStatus[Literal[301], Literal["Moved Permanently"]]] = (
    new_http_status(301, "Moved Permanently")
)
"""301 Moved Permanently: the URL changed for good; the new URL is in the response."""

FOUND: Final[HTTPStatus[Literal[302], Literal["Found"]]] = new_http_status(
    302, "Found"
)
"""302 Found: the URI changed temporarily; keep using the same URI in future."""

SEE_OTHER: Final[HTTPStatus[Literal[303], Literal["See Other"]]] = new_http_status(
    303, "See Other"
)
"""303 See Other: fetch the resource at another URI with GET."""

NOT_MODIFIED: Final[HTTPStatus[Literal[304], Literal["Not Modified"]]] = (
    new_http_status(304, "Not Modified")
)
"""304 Not Modified: the cached version is still valid."""

USE_PROXY: Final[HTTPStatus[Literal[305], Literal["Use Proxy"]]] = new_http_status(
    305, "Use Proxy"
)
"""305 Use Proxy (deprecated): the response must be accessed through a proxy.

Dropped over security concerns about in-band proxy configuration.
"""

UNUSED: Final[HTTPStatus[Literal[306], Literal["Unused"]]] = new_http_status(
    306, "Unused"
)
"""306 Unused: no longer used, but reserved."""

TEMPORARY_REDIRECT: Final[
    HTTPStatus[Literal[307], Literal["Temporary Redirect"]]
] = new_http_status(307, "Temporary Redirect")
"""307 Temporary Redirect: like 302, but the method must not change."""

PERMANENT_REDIRECT: Final[
    HTTPStatus[Literal[308], Literal["Permanent Redirect"]]
] = new_http_status(308, "Permanent Redirect")
"""308 Permanent Redirect: like 301, but the method must not change.

The new location is given in the ``Location`` header.
"""

# 4xx Client Error

BAD_REQUEST: Final[HTTPStatus[Literal[400], Literal["Bad Request"]]] = (
    new_http_status(400, "Bad Request")
)
"""400 Bad Request: the server will not process a perceived client error."""

UNAUTHORIZED: Final[HTTPStatus[Literal[401], Literal["Unauthorized"]]] = (
    new_http_status(401, "Unauthorized")
)
"""401 Unauthorized: semantically unauthenticated; the client must authenticate."""

PAYMENT_REQUIRED: Final[HTTPStatus[Literal[402], Literal["Payment Required"]]] = (
    new_http_status(402, "Payment Required")
)
"""402 Payment Required: reserved for digital payment systems, rarely used."""

FORBIDDEN: Final[HTTPStatus[Literal[403], Literal["Forbidden"]]] = new_http_status(
    403, "Forbidden"
)
"""403 Forbidden: the client is known but lacks access rights."""

NOT_FOUND: Final[HTTPStatus[Literal[404], Literal["Not Found"]]] = new_http_status(
    404, "Not Found"
)
"""404 Not Found: the server cannot find the requested resource.

May also be sent instead of 403 to hide a resource from an unauthorized client.
"""

METHOD_NOT_ALLOWED: Final[
    HTTPStatus[Literal[405], Literal["Method Not Allowed"]]
] = new_http_status(405, "Method Not Allowed")
"""405 Method Not Allowed: the method is known but unsupported by the target."""

NOT_ACCEPTABLE: Final[HTTPStatus[Literal[406], Literal["Not Acceptable"]]] = (
    new_http_status(406, "Not Acceptable")
)
"""406 Not Acceptable: nothing matches the agent's content negotiation criteria."""

PROXY_AUTHENTICATION_REQUIRED: Final[
    HTTPStatus[Literal[407], Literal["Proxy Authentication Required"]]
] = new_http_status(407, "Proxy Authentication Required")
"""407 Proxy Authentication Required: like 401, but authenticate with the proxy."""

REQUEST_TIMEOUT: Final[HTTPStatus[Literal[408], Literal["Request Timeout"]]] = (
    new_http_status(408, "Request Timeout")
)
"""408 Request Timeout: the server wants to shut down an idle connection."""

CONFLICT: Final[HTTPStatus[Literal[409], Literal["Conflict"]]] = new_http_status(
    409, "Conflict"
)
"""409 Conflict: the request conflicts with the current state of the server."""

GONE: Final[HTTPStatus[Literal[410], Literal["Gone"]]] = new_http_status(410, "Gone")
"""410 Gone: permanently deleted, with no forwarding address."""

LENGTH_REQUIRED: Final[HTTPStatus[Literal[411], Literal["Length Required"]]] = (
    new_http_status(411, "Length Required")
)
"""411 Length Required: the server requires a ``Content-Length`` header."""

PRECONDITION_FAILED: Final[
    HTTPStatus[Literal[412], Literal["Precondition Failed"]]
] = new_http_status(412, "Precondition Failed")
"""412 Precondition Failed: a conditional request header was not met."""

CONTENT_TOO_LARGE: Final[HTTPStatus[Literal[413], Literal["Content Too Large"]]] = (
    new_http_status(413, "Content Too Large")
)
"""413 Content Too Large: the body exceeds the server's limits."""

URI_TOO_LONG: Final[HTTPStatus[Literal[414], Literal["URI Too Long"]]] = (
    new_http_status(414, "URI Too Long")
)
"""414 URI Too Long: the URI is longer than the server will interpret."""

UNSUPPORTED_MEDIA_TYPE: Final[
    HTTPStatus[Literal[415], Literal["Unsupported Media Type"]]
] = new_http_status(415, "Unsupported Media Type")
"""415 Unsupported Media Type: the request's media format is not supported."""

RANGE_NOT_SATISFIABLE: Final[
    HTTPStatus[Literal[416], Literal["Range Not Satisfiable"]]
] = new_http_status(416, "Range Not Satisfiable")
"""416 Range Not Satisfiable: the ``Range`` header cannot be fulfilled."""

EXPECTATION_FAILED: Final[
    HTTPStatus[Literal[417], Literal["Expectation Failed"]]
] = new_http_status(417, "Expectation Failed")
"""417 Expectation Failed: the ``Expect`` header cannot be met."""

IM_A_TEAPOT: Final[HTTPStatus[Literal[418], Literal["I'm a teapot"]]] = (
    new_http_status(418, "I'm a teapot")
)
"""418 I'm a teapot: the server refuses to brew coffee with a teapot."""

MISDIRECTED_REQUEST: Final[
    HTTPStatus[Literal[421], Literal["Misdirected Request"]]
] = new_http_status(421, "Misdirected Request")
"""421 Misdirected Request: the server cannot answer for this scheme and authority."""

UNPROCESSABLE_CONTENT: Final[
    HTTPStatus[Literal[422], Literal["Unprocessable Content"]]
] = new_http_status(422, "Unprocessable Content")
"""422 Unprocessable Content: well-formed but semantically invalid."""

LOCKED: Final[HTTPStatus[Literal[423], Literal["Locked"]]] = new_http_status(
    423, "Locked"
)
"""423 Locked (WebDAV)."""

FAILED_DEPENDENCY: Final[HTTPStatus[Literal[424], Literal["Failed Dependency"]]] = (
    new_http_status(424, "Failed Dependency")
)
"""424 Failed Dependency (WebDAV): a previous request failed."""

TOO_EARLY: Final[HTTPStatus[Literal[425], Literal["Too Early"]]] = new_http_status(
    425, "Too Early"
)
"""425 Too Early: the server will not risk processing a possible replay."""

UPGRADE_REQUIRED: Final[HTTPStatus[Literal[426], Literal["Upgrade Required"]]] = (
    new_http_status(426, "Upgrade Required")
)
"""426 Upgrade Required: retry after switching to the protocol named in ``Upgrade``."""

PRECONDITION_REQUIRED: Final[
    HTTPStatus[Literal[428], Literal["Precondition Required"]]
] = new_http_status(428, "Precondition Required")
"""428 Precondition Required: the request must be conditional.

Guards against the lost update problem.
"""

TOO_MANY_REQUESTS: Final[HTTPStatus[Literal[429], Literal["Too Many Requests"]]] = (
    new_http_status(429, "Too Many Requests")
)
"""429 Too Many Requests: rate limited."""

REQUEST_HEADER_FIELDS_TOO_LARGE: Final[
    HTTPStatus[Literal[431], Literal["Request Header Fields Too Large"]]
] = new_http_status(431, "Request Header Fields Too Large")
"""431 Request Header Fields Too Large: resubmit with smaller header fields."""

UNAVAILABLE_FOR_LEGAL_REASONS: Final[
    HTTPStatus[Literal[451], Literal["Unavailable For Legal Reasons"]]
] = new_http_status(451, "Unavailable For Legal Reasons")
"""451 Unavailable For Legal Reasons: the resource cannot legally be provided."""

# 5xx Server Error

INTERNAL_SERVER_ERROR: Final[
    HTTPStatus[Literal[500], Literal["Internal Server Error"]]
] = new_http_status(500, "Internal Server Error")
"""500 Internal Server Error: generic failure with no more specific 5xx code."""

NOT_IMPLEMENTED: Final[HTTPStatus[Literal[501], Literal["Not Implemented"]]] = (
    new_http_status(501, "Not Implemented")
)
"""501 Not Implemented: the method is not supported; GET and HEAD never get this."""

BAD_GATEWAY: Final[HTTPStatus[Literal[502], Literal["Bad Gateway"]]] = (
    new_http_status(502, "Bad Gateway")
)
"""502 Bad Gateway: the upstream response was invalid."""

SERVICE_UNAVAILABLE: Final[
    HTTPStatus[Literal[503], Literal["Service Unavailable"]]
] = new_http_status(503, "Service Unavailable")
"""503 Service Unavailable: down for maintenance or overloaded.

Temporary; send ``Retry-After`` where possible and avoid caching the response.
"""

GATEWAY_TIMEOUT: Final[HTTPStatus[Literal[504], Literal["Gateway Timeout"]]] = (
    new_http_status(504, "Gateway Timeout")
)
"""504 Gateway Timeout: the upstream did not answer in time."""

HTTP_VERSION_NOT_SUPPORTED: Final[
    HTTPStatus[Literal[505], Literal["HTTP Version Not Supported"]]
] = new_http_status(505, "HTTP Version Not Supported")
"""505 HTTP Version Not Supported."""

VARIANT_ALSO_NEGOTIATES: Final[
    HTTPStatus[Literal[506], Literal["Variant Also Negotiates"]]
] = new_http_status(506, "Variant Also Negotiates")
"""506 Variant Also Negotiates: the chosen variant negotiates again, forming a loop."""

INSUFFICIENT_STORAGE: Final[
    HTTPStatus[Literal[507], Literal["Insufficient Storage"]]
] = new_http_status(507, "Insufficient Storage")
"""507 Insufficient Storage (WebDAV): the representation cannot be stored."""

LOOP_DETECTED: Final[HTTPStatus[Literal[508], Literal["Loop Detected"]]] = (
    new_http_status(508, "Loop Detected")
)
"""508 Loop Detected (WebDAV): infinite loop while processing the request."""

NOT_EXTENDED: Final[HTTPStatus[Literal[510], Literal["Not Extended"]]] = (
    new_http_status(510, "Not Extended")
)
"""510 Not Extended: the declared HTTP extension (RFC 2774) is not supported."""

NETWORK_AUTHENTICATION_REQUIRED: Final[
    HTTPStatus[Literal[511], Literal["Network Authentication Required"]]
] = new_http_status(511, "Network Authentication Required")
"""511 Network Authentication Required: authenticate to gain network access."""
