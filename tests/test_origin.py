"""Tests for Origin parsing and canonical form."""
from __future__ import annotations

from urllib.parse import urlsplit

import pytest
from starlette.datastructures import URL

from cross_origin_guard.protection.exceptions import InvalidConfiguration
from cross_origin_guard.protection.origin import Origin, origin_host


@pytest.mark.parametrize(
    "value, expected",
    [
        ("https://example.com", "https://example.com"),
        ("http://localhost:8080", "http://localhost:8080"),
        ("HTTPS://Example.COM", "https://example.com"),
        ("https://example.com:443", "https://example.com"),
        ("http://example.com:80", "http://example.com"),
        ("http://example.com:443", "http://example.com:443"),
        ("https://[::1]:8443", "https://[::1]:8443"),
        ("https://user:pw@example.com", "https://example.com"),
    ],
)
def test_canonical_form(value, expected):
    assert str(Origin.parse(value)) == expected


def test_accepts_split_result():
    origin = Origin.parse(urlsplit("https://app.example:8443"))
    assert origin == Origin("https", "app.example", 8443)


def test_accepts_starlette_url():
    assert str(Origin.parse(URL("https://app.example"))) == "https://app.example"


@pytest.mark.parametrize(
    "value, component",
    [
        ("example.com", "scheme"),
        ("https://", "host"),
        ("https://example.com/", "path"),
        ("https://example.com/foo", "path"),
        ("https://example.com?x=1", "query"),
        ("https://example.com#top", "fragment"),
        ("https://example.com:99999", "[Pp]ort"),
    ],
)
def test_rejects_malformed(value, component):
    with pytest.raises(InvalidConfiguration, match=component):
        Origin.parse(value)


def test_invalid_configuration_is_value_error():
    with pytest.raises(ValueError):
        Origin.parse("not an origin")


@pytest.mark.parametrize(
    "header, host",
    [
        ("https://Example.com", "example.com"),
        ("http://example.com:8080", "example.com"),
        ("null", ""),
        ("", ""),
        ("http://[::1", ""),
    ],
)
def test_origin_host_never_raises(header, host):
    assert origin_host(header) == host


@pytest.mark.parametrize(
    "uri, component",
    [
        (urlsplit("https://a.example/foo"), "path"),
        (urlsplit("https://a.example?next=1"), "query"),
        (URL("https://a.example/foo"), "path"),
        (urlsplit("//a.example"), "scheme"),
    ],
)
def test_rejects_malformed_parsed_uri(uri, component):
    with pytest.raises(InvalidConfiguration, match=component):
        Origin.parse(uri)
