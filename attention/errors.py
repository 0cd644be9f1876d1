"""Error types raised by the attention core"""


class AttentionError(Exception):
    """Base class for every fatal error the tool can report"""


class UsageError(AttentionError):
    """Malformed or missing command-line input"""


class LaunchFailure(AttentionError):
    """The target application could not be started"""


class ProbeFailure(AttentionError):
    """An environment query (window list, window properties, audio sinks) failed"""


class ActuationFailure(AttentionError):
    """A notification or power-management toggle failed"""

