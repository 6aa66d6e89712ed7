from enum import IntEnum, StrEnum

from msgspec import Struct


class StatusEntry(Struct, frozen=True, gc=False, cache_hash=True):
    code: int
    name: str
    phrase: str


STATUS_ENTRIES: tuple[StatusEntry, ...] = (
    # 1xx informational
    StatusEntry(100, "CONTINUE", "Continue"),
    StatusEntry(101, "SWITCHING_PROTOCOLS", "Switching Protocols"),
    StatusEntry(102, "PROCESSING", "Processing"),
    StatusEntry(103, "EARLY_HINTS", "Early Hints"),
    # 2xx success
    StatusEntry(200, "OK", "OK"),
    StatusEntry(201, "CREATED", "Created"),
    StatusEntry(202, "ACCEPTED", "Accepted"),
    StatusEntry(203, "NON_AUTHORITATIVE_INFORMATION", "Non Authoritative Information"),
    StatusEntry(204, "NO_CONTENT", "No Content"),
    StatusEntry(205, "RESET_CONTENT", "Reset Content"),
    StatusEntry(206, "PARTIAL_CONTENT", "Partial Content"),
    StatusEntry(207, "MULTI_STATUS", "Multi-Status"),
    # 3xx redirection
    StatusEntry(300, "MULTIPLE_CHOICES", "Multiple Choices"),
    StatusEntry(301, "MOVED_PERMANENTLY", "Moved Permanently"),
    StatusEntry(302, "MOVED_TEMPORARILY", "Moved Temporarily"),
    StatusEntry(303, "SEE_OTHER", "See Other"),
    StatusEntry(304, "NOT_MODIFIED", "Not Modified"),
    StatusEntry(305, "USE_PROXY", "Use Proxy"),
    StatusEntry(307, "TEMPORARY_REDIRECT", "Temporary Redirect"),
    StatusEntry(308, "PERMANENT_REDIRECT", "Permanent Redirect"),
    # 4xx client error
    StatusEntry(400, "BAD_REQUEST", "Bad Request"),
    StatusEntry(401, "UNAUTHORIZED", "Unauthorized"),
    StatusEntry(402, "PAYMENT_REQUIRED", "Payment Required"),
    StatusEntry(403, "FORBIDDEN", "Forbidden"),
    StatusEntry(404, "NOT_FOUND", "Not Found"),
    StatusEntry(405, "METHOD_NOT_ALLOWED", "Method Not Allowed"),
    StatusEntry(406, "NOT_ACCEPTABLE", "Not Acceptable"),
    StatusEntry(407, "PROXY_AUTHENTICATION_REQUIRED", "Proxy Authentication Required"),
    StatusEntry(408, "REQUEST_TIMEOUT", "Request Timeout"),
    StatusEntry(409, "CONFLICT", "Conflict"),
    StatusEntry(410, "GONE", "Gone"),
    StatusEntry(411, "LENGTH_REQUIRED", "Length Required"),
    StatusEntry(412, "PRECONDITION_FAILED", "Precondition Failed"),
    StatusEntry(413, "REQUEST_TOO_LONG", "Request Entity Too Large"),
    StatusEntry(414, "REQUEST_URI_TOO_LONG", "Request-URI Too Long"),
    StatusEntry(415, "UNSUPPORTED_MEDIA_TYPE", "Unsupported Media Type"),
    StatusEntry(
        416, "REQUESTED_RANGE_NOT_SATISFIABLE", "Requested Range Not Satisfiable"
    ),
    StatusEntry(417, "EXPECTATION_FAILED", "Expectation Failed"),
    StatusEntry(418, "IM_A_TEAPOT", "I'm a teapot"),
    # 419 and 420 are non-standard WebDAV codes
    StatusEntry(419, "INSUFFICIENT_SPACE_ON_RESOURCE", "Insufficient Space on Resource"),
    StatusEntry(420, "METHOD_FAILURE", "Method Failure"),
    StatusEntry(421, "MISDIRECTED_REQUEST", "Misdirected Request"),
    StatusEntry(422, "UNPROCESSABLE_ENTITY", "Unprocessable Entity"),
    StatusEntry(423, "LOCKED", "Locked"),
    StatusEntry(424, "FAILED_DEPENDENCY", "Failed Dependency"),
    StatusEntry(426, "UPGRADE_REQUIRED", "Upgrade Required"),
    StatusEntry(428, "PRECONDITION_REQUIRED", "Precondition Required"),
    StatusEntry(429, "TOO_MANY_REQUESTS", "Too Many Requests"),
    StatusEntry(
        431, "REQUEST_HEADER_FIELDS_TOO_LARGE", "Request Header Fields Too Large"
    ),
    StatusEntry(451, "UNAVAILABLE_FOR_LEGAL_REASONS", "Unavailable For Legal Reasons"),
    # 5xx server error
    StatusEntry(500, "INTERNAL_SERVER_ERROR", "Internal Server Error"),
    StatusEntry(501, "NOT_IMPLEMENTED", "Not Implemented"),
    StatusEntry(502, "BAD_GATEWAY", "Bad Gateway"),
    StatusEntry(503, "SERVICE_UNAVAILABLE", "Service Unavailable"),
    StatusEntry(504, "GATEWAY_TIMEOUT", "Gateway Timeout"),
    StatusEntry(505, "HTTP_VERSION_NOT_SUPPORTED", "HTTP Version Not Supported"),
    StatusEntry(507, "INSUFFICIENT_STORAGE", "Insufficient Storage"),
    StatusEntry(
        511, "NETWORK_AUTHENTICATION_REQUIRED", "Network Authentication Required"
    ),
)
""" ### HTTP status codes (https://www.iana.org/assignments/http-status-codes/http-status-codes.xhtml)
plus the WebDAV / non-standard codes historically shipped alongside them"""


StatusCodes = IntEnum(
    "StatusCodes",
    [(entry.name, entry.code) for entry in STATUS_ENTRIES],
    module=__name__,
)
"#### Status codes by constant name, e.g. `StatusCodes.NOT_FOUND == 404`"

ReasonPhrases = StrEnum(
    "ReasonPhrases",
    [(entry.name, entry.phrase) for entry in STATUS_ENTRIES],
    module=__name__,
)
"#### Reason phrases by constant name, e.g. `ReasonPhrases.NOT_FOUND == 'Not Found'`"
