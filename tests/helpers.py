"""Stub classifiers and shared paths for the test suite."""

from pathlib import Path
from typing import Iterable, List

from recommender.models.preferences import PreferenceQuery
from recommender.services.line_io import ScriptedIO

DATA_DIR = Path(__file__).parent.parent / "data"


class SequenceClassifier:
    """Stub classifier returning scripted labels in order, repeating the last one."""

    def __init__(self, labels: Iterable[str]):
        self.labels: List[str] = list(labels)
        self.calls: List[PreferenceQuery] = []

    def predict(self, query: PreferenceQuery) -> str:
        self.calls.append(query)
        index = min(len(self.calls), len(self.labels)) - 1
        return self.labels[index]


class FreshLabelClassifier:
    """Stub classifier that returns a new device name on every call."""

    def __init__(self):
        self.calls: List[PreferenceQuery] = []

    def predict(self, query: PreferenceQuery) -> str:
        self.calls.append(query)
        return f"Phone-{len(self.calls)}"


class FailingClassifier:
    """Stub classifier whose predictions always fail."""

    def __init__(self, error: Exception):
        self.error = error

    def predict(self, query: PreferenceQuery) -> str:
        raise self.error


class CapturingIO(ScriptedIO):
    """ScriptedIO with assertion helpers over the captured output."""

    @property
    def remaining(self) -> int:
        """Number of scripted lines not yet read."""
        return len(self._lines) - self._position

    def count(self, text: str) -> int:
        """How many output lines contain text."""
        return sum(1 for line in self.output if text in line)
