"""supctl exceptions."""

from pathlib import Path
from xmlrpc.client import Fault

from supctl.enums import FaultCode


class SupctlError(Exception):
    """Base exception for supctl errors."""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ClientConfigError(SupctlError, ValueError):
    """Raised when a client cannot be configured.

    Covers malformed endpoint URLs and configuration values that fail
    validation.

    Attributes:
        url: The endpoint URL involved, if any.
    """

    def __init__(self, message: str, *, url: str | None = None) -> None:
        """Initialize with error message and endpoint context.

        Args:
            message: Human-readable error message.
            url: The endpoint URL that was rejected.
        """
        super().__init__(message)
        self.url: str | None = url


class ConfigLoadError(ClientConfigError):
    """Raised when a configuration file cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


# =============================================================================
# Transport Exceptions
# =============================================================================


class TransportError(SupctlError):
    """Raised when a request cannot be completed at the transport level.

    Network failures, timeouts, HTTP errors, and undecodable responses all
    surface as this exception. The original exception is chained as
    ``__cause__``.

    Attributes:
        method: Fully qualified remote method name, if known.
    """

    def __init__(self, message: str, *, method: str | None = None) -> None:
        """Initialize with error message and method context.

        Args:
            message: Human-readable error message.
            method: Fully qualified remote method name.
        """
        super().__init__(message)
        self.method: str | None = method


class ClientClosedError(TransportError):
    """Raised when a call is made on a client that has been closed."""


class ResponseDecodeError(TransportError):
    """Raised when a response does not have the documented shape."""


# =============================================================================
# Remote Fault Exceptions
# =============================================================================


class RemoteFaultError(SupctlError):
    """Raised when supervisord answers with an XML-RPC fault.

    Attributes:
        code: Raw numeric fault code sent by the daemon.
        fault: The decoded fault code (``FaultCode.UNKNOWN`` if unrecognized).
        fault_string: The fault message sent by the daemon.
        method: Fully qualified remote method name, if known.
    """

    def __init__(
        self,
        code: int,
        fault_string: str,
        *,
        method: str | None = None,
    ) -> None:
        """Initialize with the fault code and message.

        Args:
            code: Raw numeric fault code.
            fault_string: The fault message.
            method: Fully qualified remote method name.
        """
        super().__init__(f"{fault_string} (code {code})")
        self.code: int = code
        self.fault: FaultCode = FaultCode(code)
        self.fault_string: str = fault_string
        self.method: str | None = method


class IncorrectParametersError(RemoteFaultError):
    """Arguments did not match the remote method's signature."""


class NotRunningError(RemoteFaultError):
    """The action requires a running process."""


class NoFileError(RemoteFaultError):
    """The target stream or file is unavailable, e.g. a closed stdin."""


_FAULT_ERRORS: dict[FaultCode, type[RemoteFaultError]] = {
    FaultCode.INCORRECT_PARAMETERS: IncorrectParametersError,
    FaultCode.NOT_RUNNING: NotRunningError,
    FaultCode.NO_FILE: NoFileError,
}


def fault_to_error(fault: Fault, *, method: str | None = None) -> RemoteFaultError:
    """Convert an XML-RPC fault into the matching exception.

    Args:
        fault: The fault returned by the transport.
        method: Fully qualified remote method name.

    Returns:
        A ``RemoteFaultError`` subclass instance for the named fault codes,
        otherwise a plain ``RemoteFaultError``.
    """
    code = int(fault.faultCode)
    error_cls = _FAULT_ERRORS.get(FaultCode(code), RemoteFaultError)
    return error_cls(code, str(fault.faultString), method=method)
