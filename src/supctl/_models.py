"""Data models for supervisord RPC responses.

This module defines the records decoded from supervisord responses:
- ServerState: Daemon lifecycle state
- ProcessInfo: Status snapshot of one process
- ProgramConfig: Static configuration of one process
- ActionStatus: Per-process outcome of a bulk action
- TailResult: Chunk returned by an incremental log read
- ConfigChanges: Group names affected by a configuration reload

Records are immutable and built fresh from a single response. Field aliases
are the keys supervisord uses on the wire.
"""

from enum import IntEnum
from typing import Annotated, Any, ClassVar, NamedTuple, Self

import pendulum
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

from supctl.enums import (
    RUNNING_STATES,
    FaultCode,
    ProcessState,
    ServerStateCode,
)


def _lenient(enum_cls: type[IntEnum]) -> BeforeValidator:
    """Decode integer codes, mapping unrecognized ones to ``UNKNOWN``."""

    def _decode(value: Any) -> Any:  # pyright: ignore[reportExplicitAny, reportAny]
        if isinstance(value, int) and not isinstance(value, bool):
            return enum_cls(value)
        return value

    return BeforeValidator(_decode)


ServerStateCodeField = Annotated[ServerStateCode, _lenient(ServerStateCode)]
ProcessStateField = Annotated[ProcessState, _lenient(ProcessState)]
FaultCodeField = Annotated[FaultCode, _lenient(FaultCode)]


class _WireModel(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> Self:  # pyright: ignore[reportExplicitAny]
        """Build the record from a response struct."""
        return cls.model_validate(data)

    def to_wire(self) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
        """Serialize back to the response struct, keyed by wire names."""
        return self.model_dump(by_alias=True, mode="json")


class ServerState(_WireModel):
    """Current state of supervisord.

    Attributes:
        code: State code.
        name: State name as reported by the daemon.
    """

    code: ServerStateCodeField = Field(alias="statecode")
    name: str = Field(alias="statename")

    def __str__(self) -> str:
        return f"{self.name} ({int(self.code)})"


class ProcessInfo(_WireModel):
    """Status snapshot of one supervised process.

    Attributes:
        name: Process name.
        group: Name of the group the process belongs to.
        description: Daemon-provided summary, e.g. ``pid 42, uptime 0:01:00``.
        start: UNIX timestamp of the last start, 0 if never started.
        stop: UNIX timestamp of the last stop, 0 if never stopped.
        now: UNIX timestamp of the daemon clock when the snapshot was taken.
        state: Process state code.
        state_name: Process state name.
        spawn_error: Spawn error message, empty when there was none.
        exit_status: Exit status of the last run.
        logfile: Deprecated alias of ``stdout_logfile``.
        stdout_logfile: Path of the stdout log file.
        stderr_logfile: Path of the stderr log file.
        pid: Process ID, 0 when the process is not running.
    """

    name: str
    group: str
    description: str = ""
    start: int = 0
    stop: int = 0
    now: int = 0
    state: ProcessStateField
    state_name: str = Field(alias="statename")
    spawn_error: str = Field(default="", alias="spawnerr")
    exit_status: int = Field(default=0, alias="exitstatus")
    logfile: str = ""
    stdout_logfile: str = ""
    stderr_logfile: str = ""
    pid: int = 0

    @model_validator(mode="after")
    def _check_state_name(self) -> Self:
        if self.state is not ProcessState.UNKNOWN and self.state.name != self.state_name:
            msg = (
                f"state {int(self.state)} ({self.state.name}) does not match "
                f"statename {self.state_name!r}"
            )
            raise ValueError(msg)
        return self

    @property
    def full_name(self) -> str:
        """Name in ``group:name`` form, as accepted by process operations."""
        if self.group == self.name:
            return self.name
        return f"{self.group}:{self.name}"

    @property
    def is_running(self) -> bool:
        return self.state in RUNNING_STATES

    @property
    def uptime(self) -> pendulum.Duration:
        """Time since the last start, measured on the daemon clock."""
        if self.state is not ProcessState.RUNNING or not self.start:
            return pendulum.duration()
        return pendulum.duration(seconds=max(self.now - self.start, 0))

    def __str__(self) -> str:
        from supctl._formatting import format_process_info

        return format_process_info(self)


class ProgramConfig(_WireModel):
    """Configuration of one process as read from the config file.

    Groups are flattened: each record describes a single process. The
    snapshot reflects the file at the time of the call, not runtime state.
    """

    name: str
    group: str
    command: str = ""
    in_use: bool = Field(default=False, alias="inuse")
    autostart: bool = False
    start_seconds: int = Field(default=0, alias="startsecs")
    start_retries: int = Field(default=0, alias="startretries")
    stop_signal: int = Field(default=0, alias="stopsignal")
    stop_wait_seconds: int = Field(default=0, alias="stopwaitsecs")
    redirect_stderr: bool = False
    exit_codes: tuple[int, ...] = Field(default=(), alias="exitcodes")
    process_priority: int = Field(default=0, alias="process_prio")
    group_priority: int = Field(default=0, alias="group_prio")
    kill_as_group: bool = Field(default=False, alias="killasgroup")
    stdout_logfile: str = ""
    stderr_logfile: str = ""
    stdout_logfile_backups: int = 0
    stderr_logfile_backups: int = 0
    stdout_logfile_maxbytes: int = 0
    stderr_logfile_maxbytes: int = 0
    stdout_capture_maxbytes: int = 0
    stderr_capture_maxbytes: int = 0
    stdout_events_enabled: bool = False
    stderr_events_enabled: bool = False

    def __str__(self) -> str:
        from supctl._formatting import format_program_config

        return format_program_config(self)


class ActionStatus(_WireModel):
    """Outcome of a bulk action for one process.

    Attributes:
        name: Process name.
        group: Group name.
        status: Outcome code.
        description: Outcome message.
    """

    name: str
    group: str
    status: FaultCodeField
    description: str = ""

    @property
    def ok(self) -> bool:
        return self.status is FaultCode.SUCCESS

    def __str__(self) -> str:
        from supctl._formatting import format_action_status

        return format_action_status(self)


class TailResult(BaseModel):
    """Chunk returned by an incremental log read.

    Attributes:
        content: Log bytes read, decoded as text.
        offset: Offset to request next; always the last byte read plus one.
        overflow: True when the log grew past the requested window and the
            daemon advanced the offset to the end of the log.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    content: str
    offset: int = Field(ge=0)
    overflow: bool


class ConfigChanges(NamedTuple):
    """Group names affected by ``reloadConfig``, in daemon order."""

    added: list[str]
    changed: list[str]
    removed: list[str]


def failed_statuses(statuses: list[ActionStatus]) -> list[ActionStatus]:
    """Return the entries of a bulk result that did not succeed."""
    return [status for status in statuses if not status.ok]
