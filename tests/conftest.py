"""Shared test fixtures for supctl tests."""

from collections.abc import Callable
from typing import Any

import pytest
from rich.console import Console

WireFactory = Callable[..., dict[str, Any]]


def make_process_info_wire(**overrides: Any) -> dict[str, Any]:
    """Build a getProcessInfo struct for a running process."""
    data: dict[str, Any] = {
        "name": "web",
        "group": "web",
        "description": "pid 4321, uptime 0:01:40",
        "start": 1_700_000_000,
        "stop": 0,
        "now": 1_700_000_100,
        "state": 20,
        "statename": "RUNNING",
        "spawnerr": "",
        "exitstatus": 0,
        "logfile": "/var/log/web.log",
        "stdout_logfile": "/var/log/web.log",
        "stderr_logfile": "/var/log/web.err",
        "pid": 4321,
    }
    data.update(overrides)
    return data


def make_program_config_wire(**overrides: Any) -> dict[str, Any]:
    """Build one entry of a getAllConfigInfo response."""
    data: dict[str, Any] = {
        "name": "web",
        "group": "web",
        "command": "/usr/bin/python -m http.server",
        "inuse": True,
        "autostart": True,
        "startsecs": 1,
        "startretries": 3,
        "stopsignal": 15,
        "stopwaitsecs": 10,
        "redirect_stderr": False,
        "exitcodes": [0],
        "process_prio": 999,
        "group_prio": 999,
        "killasgroup": False,
        "stdout_logfile": "/var/log/web.log",
        "stderr_logfile": "/var/log/web.err",
        "stdout_logfile_backups": 10,
        "stderr_logfile_backups": 10,
        "stdout_logfile_maxbytes": 52_428_800,
        "stderr_logfile_maxbytes": 52_428_800,
        "stdout_capture_maxbytes": 0,
        "stderr_capture_maxbytes": 0,
        "stdout_events_enabled": False,
        "stderr_events_enabled": False,
    }
    data.update(overrides)
    return data


@pytest.fixture
def process_info_wire() -> WireFactory:
    return make_process_info_wire


@pytest.fixture
def program_config_wire() -> WireFactory:
    return make_program_config_wire


@pytest.fixture
def console() -> Console:
    return Console(
        width=120,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )
