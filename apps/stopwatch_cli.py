from __future__ import annotations

import queue
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from core.event_loop import EventLoop
from core.event_sources import TickSource
from core.events import SessionMeta, StreamEvent, event_dump
from core.stopwatch import Stopwatch
from persistence.journal import SessionJournal
from persistence.org_writer import OrgLogWriter
from sdk.config import AppConfig, load_config
from terminal import ConsoleRenderer, KeyReader, RawTerminal, TerminalLineReader


app = typer.Typer(add_completion=False)


def open_journal(cfg: AppConfig) -> Optional[SessionJournal]:
    """Journal writer, or ``None`` when disabled or the logs dir is unusable."""

    if not cfg.journal:
        return None
    try:
        cfg.paths.verify_writeable()
        return SessionJournal(cfg.paths.journal_path)
    except OSError as exc:
        typer.echo(f"[splitwatch] journal disabled: {exc}", err=True)
        return None


def build_loop(
    cfg: AppConfig,
    log_path: Path,
    events: "queue.Queue[StreamEvent]",
    console: Console,
    terminal: Optional[RawTerminal] = None,
    keys: Optional[KeyReader] = None,
    journal: Optional[SessionJournal] = None,
) -> EventLoop:
    renderer = ConsoleRenderer(console)
    return EventLoop(
        Stopwatch.create(max_splits=cfg.max_splits),
        events,
        renderer,
        TerminalLineReader(renderer, terminal, keys),
        OrgLogWriter(log_path),
        journal=journal,
    )


@app.command()
def main(
    log_path: Optional[Path] = typer.Argument(None, help="Org file that saved sessions are appended to"),
) -> None:
    """Terminal stopwatch with nested subgoal splits."""

    cfg = load_config()
    target = cfg.paths.resolve_log_path(log_path)
    journal = open_journal(cfg)

    events: "queue.Queue[StreamEvent]" = queue.Queue()
    ticks = TickSource(events, interval=cfg.tick_interval)
    keys = KeyReader(events, poll_interval=cfg.tick_interval)
    console = Console(highlight=False)

    with RawTerminal() as terminal:
        loop = build_loop(cfg, target, events, console, terminal, keys, journal)
        meta = SessionMeta(
            log_path=str(target),
            tick_interval_ms=cfg.tick_interval_ms,
            max_splits=cfg.max_splits,
        )
        loop.record("meta", {"state": "started", **event_dump(meta)})
        ticks.start()
        keys.start()
        try:
            loop.run()
        except (KeyboardInterrupt, EOFError):
            pass
        finally:
            # Producers are daemons; they are told to stop and then abandoned.
            ticks.stop()
            keys.stop()
            loop.record("meta", {"state": "stopped"})
            if journal is not None:
                journal.close()
            console.print()


if __name__ == "__main__":
    app()
