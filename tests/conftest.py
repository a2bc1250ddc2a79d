import io
import sys

import pytest

from xshell import executor


class SpawnSpy:
    """Stands in for psutil.Popen and records every process it is asked to create"""

    def __init__(self, status=0, error=None):
        self.calls = []
        self.status = status
        self.error = error

    def __call__(self, argv):
        self.calls.append(list(argv))
        if self.error is not None:
            raise self.error
        return self

    def wait(self):
        return self.status


@pytest.fixture
def feed_stdin(monkeypatch):
    def feed(text):
        monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    return feed


@pytest.fixture
def spawn_spy(monkeypatch):
    spy = SpawnSpy()
    monkeypatch.setattr(executor.psutil, "Popen", spy)
    return spy
