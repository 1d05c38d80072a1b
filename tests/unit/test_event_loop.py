import queue

import pytest

from core.errors import IoFailure
from core.event_loop import EventLoop
from core.events import key_input, tick

S = 1_000_000_000


class FakeRenderer:
    def __init__(self):
        self.draws = []
        self.refreshes = []

    def draw(self, model):
        self.draws.append(model)

    def refresh(self, model):
        self.refreshes.append(model)


class BrokenRenderer(FakeRenderer):
    def draw(self, model):
        raise OSError(5, "Input/output error")


class ScriptedLines:
    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []

    def read(self, prompt):
        self.prompts.append(prompt)
        return self.answers.pop(0)


class MemorySink:
    def __init__(self):
        self.batches = []

    def append(self, records):
        records = list(records)
        self.batches.append(records)
        return len(records)


class FailingSink:
    def append(self, records):
        raise IoFailure("done.org", "disk full")


class ListJournal:
    session = "test-session"

    def __init__(self):
        self.entries = []

    def record(self, kind, data=None):
        self.entries.append({"kind": kind, "session": self.session, "data": data or {}})


@pytest.fixture
def events():
    return queue.Queue()


def _loop(stopwatch, events, *answers, sink=None, renderer=None, journal=None):
    return EventLoop(
        stopwatch,
        events,
        renderer or FakeRenderer(),
        ScriptedLines(*answers),
        sink or MemorySink(),
        journal=journal,
    )


def test_run_draws_then_stops_on_quit(stopwatch, events):
    loop = _loop(stopwatch, events)
    events.put(key_input("d"))
    events.put(key_input("q"))
    events.put(key_input("d"))
    loop.run()
    assert not loop.running
    assert len(loop.renderer.draws) == 2
    assert events.qsize() == 1


def test_report_scenario_is_saved(clock, stopwatch, events):
    journal = ListJournal()
    loop = _loop(stopwatch, events, "Write report", "Draft", "Outline", journal=journal)
    loop.handle(key_input("s"))
    loop.handle(key_input("g"))
    clock.advance(1)
    loop.handle(key_input("n"))
    clock.advance(4)
    loop.handle(key_input("h"))
    clock.advance(5)
    loop.handle(key_input("h"))
    loop.handle(key_input("s"))
    loop.handle(key_input("t"))

    assert loop.line_reader.prompts == [
        "Enter main goal: ",
        "Enter subgoal name: ",
        "Enter nested subgoal name: ",
    ]
    (batch,) = loop.log_sink.batches
    assert [(r.depth, r.title, r.duration_ns) for r in batch] == [
        (1, "Write report", 10 * S),
        (2, "Draft", 10 * S),
        (3, "Outline", 4 * S),
    ]
    saves = [e for e in journal.entries if e["kind"] == "io"]
    assert saves[-1]["data"]["ok"] is True
    assert all(e["session"] == "test-session" for e in journal.entries)


def test_save_failure_is_swallowed_and_journaled(clock, stopwatch, events):
    journal = ListJournal()
    loop = _loop(stopwatch, events, "g", sink=FailingSink(), journal=journal)
    loop.handle(key_input("s"))
    clock.advance(1)
    loop.handle(key_input("s"))
    loop.handle(key_input("t"))
    failure = journal.entries[-1]
    assert failure["kind"] == "io"
    assert failure["data"]["ok"] is False
    assert failure["data"]["error"] == "disk full"


def test_render_failure_propagates(stopwatch, events):
    loop = _loop(stopwatch, events, renderer=BrokenRenderer())
    events.put(key_input("q"))
    with pytest.raises(OSError):
        loop.run()


def test_ticks_refresh_only_while_running(clock, stopwatch, events):
    loop = _loop(stopwatch, events, "g")
    loop.handle(tick())
    assert loop.renderer.refreshes == []
    loop.handle(key_input("s"))
    clock.advance(2)
    loop.handle(tick())
    assert loop.renderer.refreshes[-1].time_line == "Time  : 00:00:02.000"
    loop.handle(key_input("s"))
    clock.advance(5)
    loop.handle(tick())
    assert len(loop.renderer.refreshes) == 1


def test_queued_ticks_are_coalesced_in_order(stopwatch, events):
    loop = _loop(stopwatch, events, "g")
    loop.handle(key_input("s"))
    for _ in range(10):
        events.put(tick())
    events.put(key_input("d"))
    events.put(tick())
    events.put(tick())
    events.put(key_input("q"))
    draws_before = len(loop.renderer.draws)
    loop.run()
    # run() draws once on entry, then once for "d"
    assert len(loop.renderer.draws) == draws_before + 2
    assert len(loop.renderer.refreshes) == 2


def test_commands_are_journaled(stopwatch, events):
    journal = ListJournal()
    loop = _loop(stopwatch, events, journal=journal)
    loop.handle(key_input("x"))
    loop.handle(key_input("d"))
    loop.handle(tick())
    commands = [e["data"] for e in journal.entries if e["kind"] == "command"]
    assert commands == [{"key": "x", "applied": False}, {"key": "d", "applied": True}]


def test_keys_typed_before_a_prompt_are_discarded(stopwatch, events):
    journal = ListJournal()
    loop = _loop(stopwatch, events, "Write report", journal=journal)
    events.put(key_input("n"))
    events.put(tick())
    events.put(key_input("q"))
    loop.handle(key_input("s"))

    assert events.empty()
    assert stopwatch.timer.running
    assert stopwatch.tree.active is None
    assert journal.entries[-2]["data"] == {"discarded": 2}


def test_journal_failures_do_not_stop_the_loop(stopwatch, events):
    class ClosedJournal:
        def record(self, kind, data=None):
            raise ValueError("I/O operation on closed file.")

    loop = _loop(stopwatch, events, journal=ClosedJournal())
    events.put(key_input("d"))
    events.put(key_input("q"))
    loop.run()
    assert not loop.running
