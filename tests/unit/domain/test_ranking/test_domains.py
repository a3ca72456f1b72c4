"""Tests for domain bucket extraction."""

from __future__ import annotations

import pytest

from handlerpref.domain.ranking.domains import domain_of


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("http://a.b.c.d/path", "c.d"),
        ("https://a.b.c", "b.c"),
        ("https://sub.example.com/page?q=1", "example.com"),
        ("http://example.com", "example.com"),
        ("http://localhost:8080/", "localhost"),
        ("http://user:pw@www.example.org:443/x", "example.org"),
        ("http://www.example.com./", "example.com"),
    ],
)
def test_domain_of_keeps_last_two_labels(url: str, expected: str) -> None:
    assert domain_of(url) == expected


@pytest.mark.parametrize(
    "url",
    [
        "",
        "not a url",
        "example.com/no-scheme",
        "http://",
        "http://[::1",
        "mailto:someone@example.com",
    ],
)
def test_domain_of_returns_empty_bucket_on_failure(url: str) -> None:
    assert domain_of(url) == ""


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("http://Sub.Example.COM/", "Example.COM"),
        ("HTTPS://WWW.Mixed.Org", "Mixed.Org"),
        ("http://[::1]/", "[::1]"),
        ("http://[2001:db8::1]:8080/x", "[2001:db8::1]"),
        ("http://u@Host.Example.com:81", "Example.com"),
    ],
)
def test_domain_of_keeps_host_case_and_brackets(url: str, expected: str) -> None:
    assert domain_of(url) == expected
