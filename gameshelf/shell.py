"""Terminal shell: a selectable list of stored games rendered with rich.

Keys (typed at the prompt, then Enter):
    j / down     move the selection down (wraps)
    k / up       move the selection up (wraps)
    <number>     select the game with that id
    r / Enter    run the selected game
    a            add a game
    d            delete the selected game
    c            toggle delete confirmation (saved)
    v            toggle the path column (saved)
    q            quit
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Generic, List, Optional, TextIO, TypeVar

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table

from .errors import GameShelfError
from .launch import launch_game
from .models import Game
from .settings import load_settings, save_settings
from .store import Store, open_store
from .utils import default_db_path, ensure_parent, settings_file_for, setup_logging

log = logging.getLogger(__name__)

T = TypeVar("T")

HELP = "[dim]j/k move · number select · r/Enter run · a add · d delete · c/v settings · q quit[/dim]"

class SelectionList(Generic[T]):
    """Items plus an optional selected index; next/previous wrap around."""

    def __init__(self, items: List[T]):
        self.items = list(items)
        self.selected: Optional[int] = None

    def next(self) -> None:
        if not self.items:
            self.selected = None
            return
        if self.selected is None or self.selected >= len(self.items) - 1:
            self.selected = 0
        else:
            self.selected += 1

    def previous(self) -> None:
        if not self.items:
            self.selected = None
            return
        if self.selected is None:
            self.selected = 0
        elif self.selected == 0:
            self.selected = len(self.items) - 1
        else:
            self.selected -= 1

    def select(self, index: int) -> bool:
        if 0 <= index < len(self.items):
            self.selected = index
            return True
        return False

    def current(self) -> Optional[T]:
        if self.selected is None:
            return None
        return self.items[self.selected]

    def replace(self, items: List[T]) -> None:
        self.items = list(items)
        if not self.items:
            self.selected = None
        elif self.selected is not None:
            self.selected = min(self.selected, len(self.items) - 1)

class Shell:
    def __init__(self, store: Store, settings: dict, console: Optional[Console] = None,
                 stream: Optional[TextIO] = None, settings_file: Optional[Path] = None):
        self.store = store
        self.settings = settings
        self.settings_file = settings_file   # None = toggles last for this session only
        self.console = console or Console()
        self.stream = stream          # None = read from the terminal
        self.games: SelectionList[Game] = SelectionList([])
        self.refresh()

    def refresh(self) -> None:
        self.games.replace(self.store.list_all())
        if self.games.items and self.games.selected is None:
            self.games.selected = 0

    def render(self) -> None:
        table = Table(show_header=True, header_style="bold", expand=True, box=None)
        table.add_column("", width=3)
        table.add_column("#", justify="right")
        table.add_column("Name")
        if self.settings.get("show_paths", True):
            table.add_column("Path", style="dim")
        for i, game in enumerate(self.games.items):
            chosen = i == self.games.selected
            row = [">> " if chosen else "", str(game.id), escape(game.name)]
            if self.settings.get("show_paths", True):
                row.append(escape(game.exe_path))
            table.add_row(*row, style="bold white on blue" if chosen else None)
        body = table if self.games.items else "[dim]No games yet. Press a to add one.[/dim]"
        self.console.print(Panel(body, title="Games", subtitle=HELP))

    # ── commands ─────────────────────────────────────────────────────────────

    def _ask(self, prompt: str, **kw) -> str:
        return Prompt.ask(prompt, console=self.console, stream=self.stream, **kw)

    def add(self) -> None:
        name = self._ask("Name").strip()
        exe_path = self._ask("Executable path").strip()
        if not name or not exe_path:
            self.console.print("[yellow]Name and path are both required.[/yellow]")
            return
        new_id = self.store.add(Game(name=name, exe_path=exe_path))
        self.refresh()
        for i, game in enumerate(self.games.items):
            if game.id == new_id:
                self.games.select(i)
        self.console.print(f"[green]Added {escape(name)}.[/green]")

    def delete(self) -> None:
        game = self.games.current()
        if game is None:
            self.console.print("[yellow]Nothing selected.[/yellow]")
            return
        if self.settings.get("confirm_delete", True):
            if not Confirm.ask(f"Delete {escape(game.name)}?", console=self.console, stream=self.stream):
                return
        self.store.delete(game.id)
        self.refresh()
        self.console.print(f"[green]Deleted {escape(game.name)}.[/green]")

    def run_selected(self) -> None:
        game = self.games.current()
        if game is None:
            self.console.print("[yellow]Nothing selected.[/yellow]")
            return
        ok, msg = launch_game(game)
        self.console.print(f"[green]{escape(msg)}[/green]" if ok else f"[red]Launch failed: {escape(msg)}[/red]")

    def toggle(self, key: str, label: str) -> None:
        self.settings[key] = not self.settings.get(key, True)
        state = "on" if self.settings[key] else "off"
        if self.settings_file is not None:
            try:
                save_settings(self.settings_file, self.settings)
            except OSError as e:
                log.warning("could not save settings to %s: %s", self.settings_file, e)
                self.console.print(f"[yellow]{label} {state}, but saving failed: {escape(str(e))}[/yellow]")
                return
        self.console.print(f"[green]{label} {state}.[/green]")

    def select_id(self, text: str) -> None:
        for i, game in enumerate(self.games.items):
            if str(game.id) == text:
                self.games.select(i)
                return
        self.console.print(f"[yellow]No game with id {escape(text)}.[/yellow]")

    def handle(self, command: str) -> bool:
        """Apply one command; returns False when the shell should exit."""
        cmd = command.strip().lower()
        try:
            if cmd in ("q", "quit", "exit"):
                return False
            if cmd in ("j", "down", "n"):
                self.games.next()
            elif cmd in ("k", "up", "p"):
                self.games.previous()
            elif cmd in ("", "r", "run"):
                self.run_selected()
            elif cmd in ("a", "add"):
                self.add()
            elif cmd in ("d", "del", "delete"):
                self.delete()
            elif cmd == "c":
                self.toggle("confirm_delete", "Delete confirmation")
            elif cmd == "v":
                self.toggle("show_paths", "Path column")
            elif cmd.isdigit():
                self.select_id(cmd)
            else:
                self.console.print(f"[yellow]Unknown command {escape(repr(command))}.[/yellow]")
        except GameShelfError as e:
            log.warning("command %r failed: %s", cmd, e)
            self.console.print(f"[red]{escape(str(e))}[/red]")
        return True

    def loop(self) -> None:
        while True:
            self.render()
            try:
                command = self._ask(">", default="", show_default=False)
            except (EOFError, KeyboardInterrupt):
                break
            if not self.handle(command):
                break

def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    verbose = "-v" in argv
    args = [a for a in argv if a != "-v"]
    setup_logging(verbose)

    db_path = Path(args[0]).expanduser().resolve() if args else default_db_path()
    console = Console()
    try:
        store = open_store(ensure_parent(db_path))
    except (GameShelfError, OSError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return 1
    with store:
        settings_file = settings_file_for(db_path)
        settings = load_settings(settings_file)
        try:
            Shell(store, settings, console, settings_file=settings_file).loop()
        except GameShelfError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            return 1
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
