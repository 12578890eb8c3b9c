import datetime as dt

import pytest

from earbud_tracker.record_store import RecordStore


class TickingClock:
    """Returns a new timestamp, one second later, on every call"""

    def __init__(self, start=dt.datetime(2024, 5, 1, 9, 0, 0), step=dt.timedelta(seconds=1)):
        self.now = start
        self.step = step

    def __call__(self):
        current = self.now
        self.now = self.now + self.step
        return current


class ScriptedConsole:
    """Feeds canned answers to prompts and records everything written"""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []
        self.lines = []

    def read(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def write(self, text=""):
        self.lines.append(text)

    @property
    def output(self):
        return "\n".join(self.lines)


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def store(clock):
    return RecordStore(clock=clock)


@pytest.fixture
def console_factory():
    return ScriptedConsole
