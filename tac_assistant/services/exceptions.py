"""
Service Layer Exceptions

Error taxonomy for a troubleshooting iteration. The engine turns the
backend and transport errors into a Failure result; they never end the
process.
"""


class TroubleshootingError(Exception):
    """Base class for every error raised by this package."""
    pass


class BackendError(TroubleshootingError):
    """Raised when the reasoning call fails or returns unusable content."""
    pass


class DeviceConnectionError(TroubleshootingError):
    """Raised when a transport session cannot be opened (bad credentials, unreachable host)."""
    pass


class CommandExecutionError(TroubleshootingError):
    """Raised when sending commands fails mid-session."""
    pass


class RenderError(TroubleshootingError):
    """Raised when markdown cannot be rendered. Callers degrade to plain text."""
    pass


class DiagnosisAlreadyRecordedError(TroubleshootingError):
    """Raised when a second diagnosis would overwrite the first one."""
    pass


class SessionClosedError(TroubleshootingError):
    """Raised when a question is submitted after the session reached a diagnosis."""
    pass
