"""Enumeration types for supctl.

Integer codes mirror the constants used by supervisord's XML-RPC interface.
Every integer enum decodes codes it does not know to its ``UNKNOWN`` member
so that newer daemons cannot break response decoding.
"""

from enum import IntEnum, StrEnum
from typing import Self


class Namespace(StrEnum):
    """XML-RPC method namespaces exposed by supervisord."""

    SYSTEM = "system"
    SUPERVISOR = "supervisor"


class _FallbackIntEnum(IntEnum):
    @classmethod
    def _missing_(cls, value: object) -> Self:
        return cls["UNKNOWN"]


class FaultCode(_FallbackIntEnum):
    """Fault and action status codes.

    The same table is used for XML-RPC fault codes and for the ``status``
    field of per-process results returned by bulk operations.
    """

    UNKNOWN = 0
    UNKNOWN_METHOD = 1
    INCORRECT_PARAMETERS = 2
    BAD_ARGUMENTS = 3
    SIGNATURE_UNSUPPORTED = 4
    SHUTDOWN_STATE = 6
    BAD_NAME = 10
    BAD_SIGNAL = 11
    NO_FILE = 20
    NOT_EXECUTABLE = 21
    FAILED = 30
    ABNORMAL_TERMINATION = 40
    SPAWN_ERROR = 50
    ALREADY_STARTED = 60
    NOT_RUNNING = 70
    SUCCESS = 80
    ALREADY_ADDED = 90
    STILL_RUNNING = 91
    CANT_REREAD = 92


class ProcessState(_FallbackIntEnum):
    """Lifecycle state of a supervised process.

    Values are sparse tags, not a progression. Do not compare them with
    ``<`` or ``>``.
    """

    STOPPED = 0
    STARTING = 10
    RUNNING = 20
    BACKOFF = 30
    STOPPING = 40
    EXITED = 100
    FATAL = 200
    UNKNOWN = 1000


class ServerStateCode(_FallbackIntEnum):
    """Lifecycle state of supervisord itself."""

    FATAL = 2
    RUNNING = 1
    RESTARTING = 0
    SHUTDOWN = -1
    UNKNOWN = -1000


RUNNING_STATES: frozenset[ProcessState] = frozenset(
    {ProcessState.RUNNING, ProcessState.BACKOFF, ProcessState.STARTING}
)

STOPPED_STATES: frozenset[ProcessState] = frozenset(
    {
        ProcessState.STOPPED,
        ProcessState.EXITED,
        ProcessState.FATAL,
        ProcessState.UNKNOWN,
    }
)
