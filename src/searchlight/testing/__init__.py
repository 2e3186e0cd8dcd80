"""Testing – fakes and property-based strategies for testing searches."""
from searchlight.testing.fakes import RecordingModel, RecordingQuery

__all__ = ["RecordingModel", "RecordingQuery"]
