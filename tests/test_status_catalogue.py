"""Golden-value and invariant coverage for the named status constants."""

from __future__ import annotations

import re

import pytest

from literal_http_status import statuses
from literal_http_status.services.catalogue_index import (
    find_duplicate_codes,
    list_statuses,
    named_statuses,
)

EXPECTED_STATUSES = {
    "CONTINUE": (100, "Continue"),
    "SWITCHING_PROTOCOLS": (101, "Switching Protocols"),
    "PROCESSING": (102, "Processing"),
    "EARLY_HINTS": (103, "Early Hints"),
    "OK": (200, "OK"),
    "CREATED": (201, "Created"),
    "ACCEPTED": (202, "Accepted"),
    "NON_AUTHORITATIVE_INFORMATION": (203, "Non-Authoritative Information"),
    "NO_CONTENT": (204, "No Content"),
    "RESET_CONTENT": (205, "Reset Content"),
    "PARTIAL_CONTENT": (206, "Partial Content"),
    "MULTI_STATUS": (207, "Multi-Status"),
    "ALREADY_REPORTED": (208, "Already Reported"),
    "IM_USED": (226, "IM Used"),
    "MULTIPLE_CHOICES": (300, "Multiple Choices"),
    "MOVED_PERMANENTLY": (301, "Moved Permanently"),
    "FOUND": (302, "Found"),
    "SEE_OTHER": (303, "See Other"),
    "NOT_MODIFIED": (304, "Not Modified"),
    "USE_PROXY": (305, "Use Proxy"),
    "UNUSED": (306, "Unused"),
    "TEMPORARY_REDIRECT": (307, "Temporary Redirect"),
    "PERMANENT_REDIRECT": (308, "Permanent Redirect"),
    "BAD_REQUEST": (400, "Bad Request"),
    "UNAUTHORIZED": (401, "Unauthorized"),
    "PAYMENT_REQUIRED": (402, "Payment Required"),
    "FORBIDDEN": (403, "Forbidden"),
    "NOT_FOUND": (404, "Not Found"),
    "METHOD_NOT_ALLOWED": (405, "Method Not Allowed"),
    "NOT_ACCEPTABLE": (406, "Not Acceptable"),
    "PROXY_AUTHENTICATION_REQUIRED": (407, "Proxy Authentication Required"),
    "REQUEST_TIMEOUT": (408, "Request Timeout"),
    "CONFLICT": (409, "Conflict"),
    "GONE": (410, "Gone"),
    "LENGTH_REQUIRED": (411, "Length Required"),
    "PRECONDITION_FAILED": (412, "Precondition Failed"),
    "CONTENT_TOO_LARGE": (413, "Content Too Large"),
    "URI_TOO_LONG": (414, "URI Too Long"),
    "UNSUPPORTED_MEDIA_TYPE": (415, "Unsupported Media Type"),
    "RANGE_NOT_SATISFIABLE": (416, "Range Not Satisfiable"),
    "EXPECTATION_FAILED": (417, "Expectation Failed"),
    "IM_A_TEAPOT": (418, "I'm a teapot"),
    "MISDIRECTED_REQUEST": (421, "Misdirected Request"),
    "UNPROCESSABLE_CONTENT": (422, "Unprocessable Content"),
    "LOCKED": (423, "Locked"),
    "FAILED_DEPENDENCY": (424, "Failed Dependency"),
    "TOO_EARLY": (425, "Too Early"),
    "UPGRADE_REQUIRED": (426, "Upgrade Required"),
    "PRECONDITION_REQUIRED": (428, "Precondition Required"),
    "TOO_MANY_REQUESTS": (429, "Too Many Requests"),
    "REQUEST_HEADER_FIELDS_TOO_LARGE": (431, "Request Header Fields Too Large"),
    "UNAVAILABLE_FOR_LEGAL_REASONS": (451, "Unavailable For Legal Reasons"),
    "INTERNAL_SERVER_ERROR": (500, "Internal Server Error"),
    "NOT_IMPLEMENTED": (501, "Not Implemented"),
    "BAD_GATEWAY": (502, "Bad Gateway"),
    "SERVICE_UNAVAILABLE": (503, "Service Unavailable"),
    "GATEWAY_TIMEOUT": (504, "Gateway Timeout"),
    "HTTP_VERSION_NOT_SUPPORTED": (505, "HTTP Version Not Supported"),
    "VARIANT_ALSO_NEGOTIATES": (506, "Variant Also Negotiates"),
    "INSUFFICIENT_STORAGE": (507, "Insufficient Storage"),
    "LOOP_DETECTED": (508, "Loop Detected"),
    "NOT_EXTENDED": (510, "Not Extended"),
    "NETWORK_AUTHENTICATION_REQUIRED": (511, "Network Authentication Required"),
}


def _constant_name(phrase: str) -> str:
    stripped = re.sub(r"[^A-Za-z0-9 -]", "", phrase)
    return re.sub(r"[ -]+", "_", stripped).upper()


def test_catalogue_exposes_exactly_the_expected_names() -> None:
    assert list(named_statuses()) == list(EXPECTED_STATUSES)


@pytest.mark.parametrize(
    ("name", "status", "status_text"),
    [
        ("OK", 200, "OK"),
        ("NOT_FOUND", 404, "Not Found"),
        ("IM_A_TEAPOT", 418, "I'm a teapot"),
        ("NON_AUTHORITATIVE_INFORMATION", 203, "Non-Authoritative Information"),
        ("PERMANENT_REDIRECT", 308, "Permanent Redirect"),
    ],
)
def test_golden_pairs_keep_punctuation(
    name: str, status: int, status_text: str
) -> None:
    record = getattr(statuses, name)

    assert record.status == status
    assert record.status_text == status_text


def test_every_constant_matches_the_registered_pair() -> None:
    for name, record in named_statuses().items():
        assert (record.status, record.status_text) == EXPECTED_STATUSES[name]


def test_constant_names_derive_from_phrases() -> None:
    """Names are the upper-cased phrase with punctuation dropped."""

    for name, record in named_statuses().items():
        assert name == _constant_name(record.status_text)


def test_codes_are_unique() -> None:
    codes = [record.status for record in list_statuses()]

    assert len(codes) == len(set(codes))
    assert find_duplicate_codes() == {}


def test_codes_stay_in_the_http_range() -> None:
    assert all(100 <= record.status <= 599 for record in list_statuses())


def test_unofficial_bandwidth_code_is_absent() -> None:
    assert 509 not in {record.status for record in list_statuses()}


def test_no_constant_can_be_mutated() -> None:
    for record in list_statuses():
        original = record.as_response_fields()
        with pytest.raises(AttributeError):
            setattr(record, "status", 0)
        with pytest.raises(AttributeError):
            setattr(record, "status_text", "mutated")
        assert record.as_response_fields() == original


def test_repeated_reads_return_equal_values() -> None:
    assert statuses.NOT_FOUND == statuses.NOT_FOUND
    assert named_statuses()["NOT_FOUND"] == statuses.NOT_FOUND
    assert list_statuses() == list_statuses()


def test_constant_spreads_into_response_object() -> None:
    response = {"body": b"", **statuses.TOO_MANY_REQUESTS}

    assert response == {"body": b"", "status": 429, "statusText": "Too Many Requests"}


def test_annotations_carry_literal_pairs() -> None:
    """Each constant is annotated with its literal code and phrase."""

    annotations = statuses.__annotations__
    for name, (status, status_text) in EXPECTED_STATUSES.items():
        annotation = str(annotations[name])
        assert f"Literal[{status}]" in annotation
        assert f"Literal[{status_text!r}]" in annotation


def test_constructor_is_exported_with_the_catalogue() -> None:
    custom = statuses.new_http_status(999, "Custom")

    assert isinstance(custom, statuses.HTTPStatus)
    assert custom.as_response_fields() == {"status": 999, "statusText": "Custom"}
    assert "new_http_status" not in named_statuses()
