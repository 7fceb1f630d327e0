import io

import pytest

from puredns.cachereader import CacheReader, DNSAnswer, DNSCache, RRType

A = RRType.A
AAAA = RRType.AAAA
CNAME = RRType.CNAME


@pytest.mark.parametrize(
    "data, want_cache, want_domains",
    [
        ("example.com. A 127.0.0.1", {"example.com": [DNSAnswer(A, "127.0.0.1")]}, ["example.com"]),
        (
            "www.example.com. CNAME example.com.\nexample.com. A 127.0.0.1\nexample.com. AAAA ::1",
            {
                "www.example.com": [
                    DNSAnswer(CNAME, "example.com"),
                    DNSAnswer(A, "127.0.0.1"),
                    DNSAnswer(AAAA, "::1"),
                ]
            },
            ["www.example.com"],
        ),
        ("example.com. NS ns.example.com.", {"example.com": []}, []),
        (
            "example.com. NS ns.example.com.\nexample.com. AAAA ::1",
            {"example.com": [DNSAnswer(AAAA, "::1")]},
            ["example.com"],
        ),
        (
            "\nexample.com. A 127.0.0.1\n\nwww.test.com. CNAME test.com.\n"
            "test.com. A 127.0.0.1\ntest.com. AAAA ::1\n",
            {
                "example.com": [DNSAnswer(A, "127.0.0.1")],
                "www.test.com": [
                    DNSAnswer(CNAME, "test.com"),
                    DNSAnswer(A, "127.0.0.1"),
                    DNSAnswer(AAAA, "::1"),
                ],
            },
            ["example.com", "www.test.com"],
        ),
        ("garbage\nexample.com. A 127.0.0.1", {"example.com": []}, []),
        (
            "example.com. A 127.0.0.1\ngarbage",
            {"example.com": [DNSAnswer(A, "127.0.0.1")]},
            ["example.com"],
        ),
        (". A 127.0.0.1", {"": []}, []),
    ],
)
def test_read(data, want_cache, want_domains):
    out = io.StringIO()
    cache = DNSCache()

    count = CacheReader(io.StringIO(data)).read(out, cache, 0)

    assert count == len(want_domains)
    assert out.getvalue().splitlines() == want_domains
    for question, answers in want_cache.items():
        assert cache.find(question) == answers


def test_read_with_max_resumes():
    data = (
        "\nexample.com. A 127.0.0.1\n\nexample.net. AAAA ::1\n\n"
        "example.org. CNAME example.net.\nexample.net. AAAA ::1"
    )
    out = io.StringIO()
    reader = CacheReader(io.StringIO(data))

    assert reader.read(out, None, 2) == 2
    assert out.getvalue().splitlines() == ["example.com", "example.net"]

    assert reader.read(out, None, 2) == 1
    assert out.getvalue().splitlines() == ["example.com", "example.net", "example.org"]

    assert reader.read(out, None, 2) == 0


def test_read_count_only():
    data = (
        "\nexample.com. A 127.0.0.1\n\nexample.net. AAAA ::1\n\n"
        "example.org. CNAME example.net.\nexample.net. AAAA ::1\n"
    )
    assert CacheReader(io.StringIO(data)).read(None, None, 0) == 3


def test_cache_deduplicates():
    cache = DNSCache()
    cache.add("example.com", [DNSAnswer(A, "127.0.0.1")])
    cache.add("example.com", [DNSAnswer(A, "127.0.0.1"), DNSAnswer(AAAA, "::1")])
    assert cache.find("example.com") == [DNSAnswer(A, "127.0.0.1"), DNSAnswer(AAAA, "::1")]
    assert cache.find("missing.example.com") == []
    assert len(cache) == 1


def test_close_closes_reader():
    source = io.StringIO("example.com. A 127.0.0.1")
    with CacheReader(source) as reader:
        assert reader.read() == 1
    assert source.closed