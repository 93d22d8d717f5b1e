"""Session facade used by front ends."""

from .session import READY_STATUS, EditorSession

__all__ = ["EditorSession", "READY_STATUS"]
