"""Infrastructure interface exports."""

from .account_client import AccountClient
from .auth_provider import AuthProvider
from .message_host import MessageHost
from .recorder import RecorderBackend
from .task_host import TaskHost
from .telemetry_sink import TelemetrySink

__all__ = [
    "AccountClient",
    "AuthProvider",
    "MessageHost",
    "RecorderBackend",
    "TaskHost",
    "TelemetrySink",
]
