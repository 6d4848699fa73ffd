"""Management command to fetch weather using the same stack as the board."""
from __future__ import annotations

import json
from typing import Any

from django.core.exceptions import ImproperlyConfigured
from django.core.management.base import BaseCommand, CommandError

from dashboard.api.views import build_fetcher


class Command(BaseCommand):
    help = "Fetch the current temperature and condition for one city"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--city", type=str, required=True, help="City name as understood by OpenWeather")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        city = options["city"].strip()
        if not city:
            raise CommandError("--city must not be empty")
        try:
            fetcher = build_fetcher()
        except ImproperlyConfigured as exc:
            raise CommandError(str(exc)) from exc

        reading = fetcher.fetch(city)
        self.stdout.write(json.dumps(reading.as_dict()))
