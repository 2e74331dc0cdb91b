"""
Transport helper tests
"""

import http.client
import socket
import threading
import urllib.error

from simulator.implementations.remote.transport import (
    TransportErrorLatch,
    build_opener,
    describe_error,
    url_without_query,
)


def test_latch_set_and_clear():
    latch = TransportErrorLatch()
    assert latch.get() is None

    latch.set("boom")
    assert latch.get() == "boom"

    latch.clear()
    assert latch.get() is None


def test_latch_concurrent_writers_leave_a_whole_message():
    latch = TransportErrorLatch()
    messages = [f"error {i}" for i in range(20)]

    threads = [threading.Thread(target=latch.set, args=(message,)) for message in messages]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert latch.get() in messages


def test_url_without_query():
    assert url_without_query("http://host:8080/call?atFloor=1&to=UP") == "http://host:8080/call"


def test_describe_bad_gateway():
    error = urllib.error.HTTPError("http://host/nextCommand", 502, "Bad Gateway", None, None)

    assert describe_error("http://host/nextCommand?x=1", error) == (
        "Server returned HTTP response code: 502 for URL: http://host/nextCommand"
    )


def test_describe_connection_refused_is_raw():
    error = urllib.error.URLError(ConnectionRefusedError(111, "Connection refused"))

    assert describe_error("http://host/go", error) == str(error)


def test_describe_unknown_host_without_urllib_wrapper():
    error = socket.gaierror(-2, "Name or service not known")

    assert describe_error("http://nowhere.invalid/reset", error) == (
        'IP address of "nowhere.invalid" could not be determined'
    )


def test_describe_http_exception_is_raw():
    error = http.client.BadStatusLine("garbage")

    assert describe_error("http://host/nextCommand", error) == str(error)


def test_opener_handles_http_and_https():
    opener = build_opener(read_timeout=0.5)

    handler_names = {type(handler).__name__ for handler in opener.handlers}
    assert "_TimedHTTPHandler" in handler_names
    assert "_TimedHTTPSHandler" in handler_names
    assert "HTTPHandler" not in handler_names
