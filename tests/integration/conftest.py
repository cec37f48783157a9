"""Fixtures running the client against an in-process XML-RPC server."""

import threading
from collections.abc import Iterator
from pathlib import Path

import pytest

from supctl import SupervisorClient
from supctl.utils import create_client_logger

from ._fake_supervisord import FakeSupervisor, ThreadedXMLRPCServer


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def fake_supervisor() -> FakeSupervisor:
    return FakeSupervisor()


@pytest.fixture
def supervisord_url(fake_supervisor: FakeSupervisor) -> Iterator[str]:
    """Serve the fake supervisord on a free port and yield its base URL.

    The URL embeds the credentials ``user:123`` used by the default
    supervisord test configuration.
    """
    server = ThreadedXMLRPCServer(fake_supervisor)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address[:2]
    try:
        yield f"http://user:123@{host}:{port}"
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)


@pytest.fixture
def log_file(tmp_path: Path) -> Path:
    return tmp_path / "logs" / "client.log"


@pytest.fixture
def client(supervisord_url: str, log_file: Path) -> Iterator[SupervisorClient]:
    logger = create_client_logger(level="debug", log_format="json", log_file=str(log_file))
    with SupervisorClient(supervisord_url, timeout=5, logger=logger) as c:
        yield c
