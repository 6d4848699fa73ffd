"""Management command rendering the live world clock board in the terminal."""
from __future__ import annotations

import time
from typing import Any

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.core.management.base import BaseCommand, CommandError
from rich.console import Console
from rich.live import Live

from dashboard.api.console import render_board, render_text
from dashboard.api.views import build_fetcher
from worldclock.services import WorldClockBoard


class Command(BaseCommand):
    help = "Show the local time and current temperature for the configured cities"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument(
            "--once",
            action="store_true",
            help="Wait for the weather, print a single frame and exit",
        )
        parser.add_argument("--width", type=int, default=100, help="Frame width used with --once")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        try:
            fetcher = build_fetcher()
        except ImproperlyConfigured as exc:
            raise CommandError(str(exc)) from exc

        board = WorldClockBoard(fetcher, tick_seconds=settings.WORLD_CLOCK_TICK_SECONDS)

        if options["once"]:
            board.refresh_times()
            board.load_weather()
            self.stdout.write(render_text(board.cells(), width=options["width"]))
            return

        # Live redraws write partial lines that OutputWrapper must leave unterminated.
        ending, self.stdout.ending = self.stdout.ending, ""
        console = Console(file=self.stdout)
        board.mount()
        try:
            with Live(render_board(board.cells()), console=console, refresh_per_second=4) as live:
                while True:
                    time.sleep(board.tick_seconds)
                    live.update(render_board(board.cells()))
        except KeyboardInterrupt:
            self.stdout.write("Interrupted, stopping the clock\n")
        finally:
            board.unmount()
            self.stdout.ending = ending
