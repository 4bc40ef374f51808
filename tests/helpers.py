from contextlib import contextmanager
from datetime import datetime, timezone
from unittest import mock

from dailyfile.lib import BaseAppender


@contextmanager
def frozen_today(year, month, day):
    now = datetime(year, month, day, 12, 0, 0, tzinfo=timezone.utc)
    with mock.patch("django.utils.timezone.now", return_value=now):
        yield now


class RecordingAppender(BaseAppender):
    """Captures every call the handler makes, in order."""

    def __init__(self):
        self.set_file_calls = []
        self.records = []
        self.formatter = None
        self.closed = 0
        self.flushed = 0

    def set_file(self, filename, *args):
        self.set_file_calls.append((filename,) + args)

    def set_formatter(self, fmt):
        self.formatter = fmt

    def write(self, record):
        self.records.append(record)

    def flush(self):
        self.flushed += 1

    def close(self):
        self.closed += 1
