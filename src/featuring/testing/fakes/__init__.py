"""Testing fakes – in-memory doubles."""
from featuring.testing.fakes.actions import CallRecorder

__all__ = ["CallRecorder"]
