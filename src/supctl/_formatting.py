"""Human-readable formatting for supervisord records.

Each record type has its own formatter that lists every declared field in a
fixed order as an aligned ``Label: value`` block. Table builders render lists
of records with rich for console output.
"""

from collections.abc import Iterable

from rich.table import Table

from supctl.enums import FaultCode, ProcessState

from ._models import ActionStatus, ProcessInfo, ProgramConfig


def _format_fields(fields: list[tuple[str, object]]) -> str:
    width = max(len(label) for label, _ in fields)
    return "".join(f"{label:<{width}}: {value}\n" for label, value in fields)


def _format_enum(value: ProcessState | FaultCode) -> str:
    return f"{value.name} ({int(value)})"


def _yes_no(flag: bool) -> str:  # noqa: FBT001
    return "yes" if flag else "no"


def format_process_info(info: ProcessInfo) -> str:
    """Format a ProcessInfo as an aligned field listing.

    Args:
        info: The process snapshot to format.

    Returns:
        One ``Label: value`` line per field.
    """
    return _format_fields(
        [
            ("Name", info.name),
            ("Group", info.group),
            ("Description", info.description),
            ("Start", info.start),
            ("Stop", info.stop),
            ("Now", info.now),
            ("State", _format_enum(info.state)),
            ("StateName", info.state_name),
            ("SpawnErr", info.spawn_error),
            ("ExitStatus", info.exit_status),
            ("Logfile", info.logfile),
            ("StdoutLogfile", info.stdout_logfile),
            ("StderrLogfile", info.stderr_logfile),
            ("Pid", info.pid),
        ]
    )


def format_program_config(config: ProgramConfig) -> str:
    """Format a ProgramConfig as an aligned field listing.

    Args:
        config: The program configuration to format.

    Returns:
        One ``Label: value`` line per field.
    """
    return _format_fields(
        [
            ("Name", config.name),
            ("Group", config.group),
            ("Command", config.command),
            ("InUse", _yes_no(config.in_use)),
            ("Autostart", _yes_no(config.autostart)),
            ("StartSeconds", config.start_seconds),
            ("StartRetries", config.start_retries),
            ("StopSignal", config.stop_signal),
            ("StopWaitSeconds", config.stop_wait_seconds),
            ("RedirectStderr", _yes_no(config.redirect_stderr)),
            ("ExitCodes", ",".join(str(code) for code in config.exit_codes)),
            ("ProcessPriority", config.process_priority),
            ("GroupPriority", config.group_priority),
            ("KillAsGroup", _yes_no(config.kill_as_group)),
            ("StdoutLogfile", config.stdout_logfile),
            ("StderrLogfile", config.stderr_logfile),
            ("StdoutLogfileBackups", config.stdout_logfile_backups),
            ("StderrLogfileBackups", config.stderr_logfile_backups),
            ("StdoutLogfileMaxBytes", config.stdout_logfile_maxbytes),
            ("StderrLogfileMaxBytes", config.stderr_logfile_maxbytes),
            ("StdoutCaptureMaxBytes", config.stdout_capture_maxbytes),
            ("StderrCaptureMaxBytes", config.stderr_capture_maxbytes),
            ("StdoutEventsEnabled", _yes_no(config.stdout_events_enabled)),
            ("StderrEventsEnabled", _yes_no(config.stderr_events_enabled)),
        ]
    )


def format_action_status(status: ActionStatus) -> str:
    """Format an ActionStatus as a single line.

    Args:
        status: The bulk action outcome to format.

    Returns:
        A line such as ``web:web_0: SUCCESS (80) OK``.
    """
    name = status.name if status.group == status.name else f"{status.group}:{status.name}"
    line = f"{name}: {_format_enum(status.status)}"
    if status.description:
        line += f" {status.description}"
    return line


_STATE_STYLES: dict[ProcessState, str] = {
    ProcessState.RUNNING: "green",
    ProcessState.STARTING: "cyan",
    ProcessState.BACKOFF: "yellow",
    ProcessState.STOPPING: "yellow",
    ProcessState.FATAL: "bold red",
    ProcessState.EXITED: "red",
    ProcessState.UNKNOWN: "magenta",
}


def process_info_table(infos: Iterable[ProcessInfo]) -> Table:
    """Build a status table in the style of ``supervisorctl status``.

    Args:
        infos: Process snapshots, typically from ``get_all_process_info``.

    Returns:
        A rich Table with one row per process.
    """
    table = Table(title="Processes")
    table.add_column("Name", style="bold")
    table.add_column("State")
    table.add_column("PID", justify="right")
    table.add_column("Uptime", justify="right")
    table.add_column("Description")

    for info in infos:
        style = _STATE_STYLES.get(info.state, "")
        table.add_row(
            info.full_name,
            f"[{style}]{info.state_name}[/{style}]" if style else info.state_name,
            str(info.pid) if info.pid else "-",
            info.uptime.in_words() if info.uptime.in_seconds() else "-",
            info.spawn_error or info.description,
        )

    return table


def action_status_table(statuses: Iterable[ActionStatus]) -> Table:
    """Build a table of bulk action outcomes.

    Args:
        statuses: Outcomes returned by a bulk operation.

    Returns:
        A rich Table with one row per process; failed rows are highlighted.
    """
    table = Table(title="Results")
    table.add_column("Name", style="bold")
    table.add_column("Status")
    table.add_column("Description")

    for status in statuses:
        name = (
            status.name if status.group == status.name else f"{status.group}:{status.name}"
        )
        label = _format_enum(status.status)
        table.add_row(
            name,
            label if status.ok else f"[red]{label}[/red]",
            status.description,
        )

    return table
