"""
Engine faults

Everything an engine can raise derives from EngineBrokenError, which is the
only fault kind the building has to know about.
"""


class EngineBrokenError(Exception):
    """The engine cannot be trusted to drive the car any more"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(EngineBrokenError):
    """
    Network failure talking to a remote engine

    Timeouts, refused connections, DNS failures and non-2xx statuses.
    Remote engines latch this message until a request succeeds again.
    """


class ProtocolError(EngineBrokenError):
    """The engine answered, but the answer is not part of the protocol"""
