"""Chains lookups that can fail, without nested ifs."""

import json
from urllib.parse import urlparse, ParseResult

from railway import Composable, compose
from railway.result import (
    Success,
    Failure,
    Result,
    attempt,
    from_optional,
    is_failure_type,
)

GET_EVENTS = "getEvents"

SERVICES = {
    GET_EVENTS: "http://events.example.com/Service.asmx/GetEvents",
    "broken": "not a url",
}

RESPONSES = {
    "/Service.asmx/GetEvents": '{"events": {"1": "Opening", "2": "Closing"}}',
}


def parse_url(address: str) -> Result[ParseResult, str]:
    url = urlparse(address)
    if not url.scheme or not url.netloc:
        return Failure(f"invalid url {address!r}")
    return Success(url)


@attempt(KeyError)
def download(url: ParseResult) -> str:
    return RESPONSES[url.path]


@attempt(json.JSONDecodeError)
def decode(text: str) -> dict:
    return json.loads(text)


def event_at(services: dict[str, str], service: str, index: str) -> Result:
    return (
        from_optional(services.get(service), f"unknown service {service!r}")
        .flat_map(parse_url)
        .flat_map(download)
        .flat_map(decode)
        .map(lambda payload: payload["events"].get(index))
    )


def test_event_found():
    assert event_at(SERVICES, GET_EVENTS, "1") == Success("Opening")


def test_unknown_service():
    assert event_at(SERVICES, "other", "1") == Failure("unknown service 'other'")


def test_invalid_url():
    assert event_at(SERVICES, "broken", "1") == Failure("invalid url 'not a url'")


def test_download_failure():
    services = {GET_EVENTS: "http://events.example.com/missing"}

    assert is_failure_type(event_at(services, GET_EVENTS, "1"), KeyError)


def test_decode_failure():
    RESPONSES["/bad"] = "{"
    try:
        services = {GET_EVENTS: "http://events.example.com/bad"}
        result = event_at(services, GET_EVENTS, "1")
    finally:
        del RESPONSES["/bad"]

    assert is_failure_type(result, json.JSONDecodeError)


def test_composed_steps():
    lookup = (
        Composable(parse_url)
        >> (lambda r: r.flat_map(download))
        >> (lambda r: r.flat_map(decode))
    )

    assert lookup(SERVICES[GET_EVENTS]).map(len) == Success(1)
    assert compose(lookup, lambda r: r.is_failure())("nope")
