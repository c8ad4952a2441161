"""Clock helpers shared by log records, crash records and engine frames."""

import time
from datetime import datetime, timezone


def now_micros():
    return int(time.time() * 1_000_000)


def format_timestamp(epoch_us=None):
    """ISO 8601 UTC with microseconds, e.g. ``2024-01-01T00:00:00.000000Z``.

    ``epoch_us`` defaults to now; records use it so every log line and error
    carries the same sortable form.
    """
    if epoch_us is None:
        epoch_us = now_micros()
    moment = datetime.fromtimestamp(epoch_us / 1_000_000, tz=timezone.utc)
    return moment.isoformat(timespec="microseconds").replace("+00:00", "Z")


def format_seconds(seconds):
    """Five decimals, as the frame header shows tick and render durations."""
    return f"{seconds:.5f}"
