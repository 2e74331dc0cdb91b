"""
HTTP transport helpers for the remote engine

- TransportErrorLatch: sticky error message shared with background workers
- build_opener: urllib opener with separate connect and read timeouts
- describe_error: human readable message for a failed request
"""

import http.client
import re
import socket
import threading
import urllib.error
import urllib.request
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

_ERROR_STATUS_MESSAGE = re.compile(r"HTTP Error (\d+):.*")

# Exceptions treated as transport failures
NETWORK_ERRORS = (OSError, http.client.HTTPException)


class TransportErrorLatch:
    """
    Optional error message, set by a failed request and cleared by a successful one

    Written from the polling thread and from notification workers alike.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._message: Optional[str] = None

    def set(self, message: str):
        with self._lock:
            self._message = message

    def clear(self):
        with self._lock:
            self._message = None

    def get(self) -> Optional[str]:
        with self._lock:
            return self._message


class _TimedHTTPConnection(http.client.HTTPConnection):
    """HTTP connection using `timeout` to connect and `read_timeout` afterwards"""

    def __init__(self, *args, read_timeout: Optional[float] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.read_timeout = read_timeout

    def connect(self):
        super().connect()
        if self.read_timeout is not None:
            self.sock.settimeout(self.read_timeout)


class _TimedHTTPSConnection(http.client.HTTPSConnection):

    def __init__(self, *args, read_timeout: Optional[float] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.read_timeout = read_timeout

    def connect(self):
        super().connect()
        if self.read_timeout is not None:
            self.sock.settimeout(self.read_timeout)


class _TimedHTTPHandler(urllib.request.HTTPHandler):

    def __init__(self, read_timeout: float):
        super().__init__()
        self.read_timeout = read_timeout

    def http_open(self, req):
        return self.do_open(_TimedHTTPConnection, req, read_timeout=self.read_timeout)


class _TimedHTTPSHandler(urllib.request.HTTPSHandler):

    def __init__(self, read_timeout: float):
        super().__init__()
        self.read_timeout = read_timeout

    def https_open(self, req):
        return self.do_open(_TimedHTTPSConnection, req, context=self._context,
                            read_timeout=self.read_timeout)


def build_opener(read_timeout: float) -> urllib.request.OpenerDirector:
    """
    Build an opener whose sockets switch to read_timeout once connected

    The connect timeout is the `timeout` argument given to opener.open().
    Non-2xx statuses raise urllib.error.HTTPError as with urlopen().
    """
    return urllib.request.build_opener(
        _TimedHTTPHandler(read_timeout),
        _TimedHTTPSHandler(read_timeout),
    )


def url_without_query(url: str) -> str:
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, '', ''))


def describe_error(url: str, error: Exception) -> str:
    """
    Classify a failed request into a human readable message

    First match wins:
    1. 404 -> resource not found (URL without query)
    2. Unknown host -> host name that could not be resolved
    3. Other HTTP status -> status code and URL without query
    4. Anything else -> the raw error message
    """
    if isinstance(error, urllib.error.HTTPError) and error.code == 404:
        return f'Resource "{url_without_query(url)}" is not found'

    reason = error.reason if isinstance(error, urllib.error.URLError) else error
    if isinstance(reason, socket.gaierror):
        return f'IP address of "{urlsplit(url).hostname}" could not be determined'

    matcher = _ERROR_STATUS_MESSAGE.match(str(error))
    if matcher:
        return f"Server returned HTTP response code: {matcher.group(1)} for URL: {url_without_query(url)}"

    return str(error)
