"""
HTTP Elevator Engine

Remote engine reached by polling a decision service over HTTP GET.
"""

from concurrent.futures import ThreadPoolExecutor
from urllib.parse import urlencode, urljoin

from simulator.core.command import Command, Direction
from simulator.core.rider import Rider
from simulator.exceptions import ProtocolError, TransportError
from simulator.interfaces.elevator_engine import IElevatorEngine
from .transport import NETWORK_ERRORS, TransportErrorLatch, build_opener, describe_error

VALID_COMMANDS = "|".join(command.value for command in Command)


class HTTPElevatorEngine(IElevatorEngine):
    """
    Engine living behind a remote HTTP server

    Endpoints (relative to base_url):
    - nextCommand                     polled synchronously, one line answer
    - call?atFloor=<int>&to=<UP|DOWN> fire-and-forget
    - go?floorToGo=<int>              fire-and-forget
    - userHasEntered / userHasExited  fire-and-forget
    - reset?cause=<text>              fire-and-forget, always attempted

    A failed request latches its error message. While latched, every
    operation except reset() raises TransportError without touching the
    network, until a request succeeds again. Notifications run on a worker
    pool, so their failures only show up on the next latch check.

    Usage:
        with HTTPElevatorEngine("http://localhost:8081/") as engine:
            building = Building(engine)
    """

    def __init__(self, base_url: str, connect_timeout: float = 1.0, read_timeout: float = 1.0,
                 max_workers: int = 4, executor=None, opener=None):
        """
        Initialize HTTP engine

        Args:
            base_url: Address of the decision service; endpoints are resolved against it
            connect_timeout: Seconds allowed to establish a connection
            read_timeout: Seconds allowed for each read once connected
            max_workers: Size of the notification pool when no executor is given
            executor: Object with submit(fn, *args) running notifications
            opener: Object with open(url, timeout=...) returning a file-like response
        """
        self.base_url = base_url
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout

        self._owns_executor = executor is None
        if executor is None:
            executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="engine-notify")
        self.executor = executor
        self.opener = opener if opener is not None else build_opener(read_timeout)
        self.latch = TransportErrorLatch()
        self._closed = False

        self.next_command_url = self._url('nextCommand')
        self.user_has_entered_url = self._url('userHasEntered')
        self.user_has_exited_url = self._url('userHasExited')
        self.reset_url = self._url('reset')

    @property
    def transport_error(self):
        """Latched transport error message, or None"""
        return self.latch.get()

    def next_command(self) -> Command:
        self._check_transport_error()
        url = self.next_command_url
        try:
            with self.opener.open(url, timeout=self.connect_timeout) as response:
                line = response.readline()
        except NETWORK_ERRORS as e:
            message = describe_error(url, e)
            self.latch.set(message)
            print(f"[HTTPEngine] {url} failed: {message}")
            raise TransportError(message) from e

        # The connection worked, whatever the answer is
        self.latch.clear()
        if isinstance(line, bytes):
            line = line.decode('utf-8', errors='replace')
        token = line.rstrip('\r\n')
        print(f"[HTTPEngine] {url} {token}")
        try:
            return Command.parse(token)
        except ValueError:
            raise ProtocolError(
                f'Command "{token}" is not a valid command; '
                f'valid commands are [{VALID_COMMANDS}] with case sensitive'
            ) from None

    def call(self, at_floor: int, direction: Direction) -> 'HTTPElevatorEngine':
        self._check_transport_error()
        query = urlencode({'atFloor': at_floor, 'to': Direction(direction).value})
        self._http_get(self._url(f"call?{query}"))
        return self

    def go(self, floor_to_go: int) -> 'HTTPElevatorEngine':
        self._check_transport_error()
        self._http_get(self._url(f"go?{urlencode({'floorToGo': floor_to_go})}"))
        return self

    def rider_entered(self, rider: Rider) -> 'HTTPElevatorEngine':
        self._check_transport_error()
        self._http_get(self.user_has_entered_url)
        return self

    def rider_exited(self, rider: Rider) -> 'HTTPElevatorEngine':
        self._check_transport_error()
        self._http_get(self.user_has_exited_url)
        return self

    def reset(self, cause: str) -> 'HTTPElevatorEngine':
        # No latch check: a reset is how a broken engine gets another chance
        self._http_get(f"{self.reset_url}?{urlencode({'cause': cause})}")
        return self

    def close(self):
        """
        Stop sending notifications

        Later notifications (including reset) are dropped. The notification
        pool is shut down if this engine created it.
        """
        self._closed = True
        if self._owns_executor:
            self.executor.shutdown(wait=True)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def _url(self, path_and_query: str) -> str:
        return urljoin(self.base_url, path_and_query)

    def _check_transport_error(self):
        message = self.latch.get()
        if message is not None:
            raise TransportError(message)

    def _http_get(self, url: str):
        if self._closed:
            print(f"[HTTPEngine] {url} dropped: engine is closed")
            return
        print(f"[HTTPEngine] {url}")
        self.executor.submit(self._fire_and_forget, url)

    def _fire_and_forget(self, url: str):
        try:
            with self.opener.open(url, timeout=self.connect_timeout) as response:
                response.read()
        except NETWORK_ERRORS as e:
            message = describe_error(url, e)
            self.latch.set(message)
            print(f"[HTTPEngine] {url} failed: {message}")
        else:
            self.latch.clear()

    def __repr__(self) -> str:
        return f"HTTPElevatorEngine({self.base_url!r})"
