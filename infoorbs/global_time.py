"""Wall-clock time shared by the widgets, with a time zone offset from a web API."""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any, Optional

import requests

log = logging.getLogger(__name__)

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

_UPDATE_INTERVAL_MS = 1000


def _millis() -> int:
    return int(time.monotonic() * 1000)


def _as_int(value: Any) -> int:
    if isinstance(value, (bool, int)):
        return int(value)
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    return 0


def fetch_timezone_offset(
    api_url: str,
    api_key: str,
    zone: str,
    session: Optional[requests.Session] = None,
) -> Optional[int]:
    """Ask the time zone API for the GMT offset in seconds; None when it fails."""
    params = {"key": api_key, "format": "json", "fields": "gmtOffset", "by": "zone", "zone": zone}
    http = session or requests.Session()
    try:
        response = http.get(api_url, params=params, timeout=10)
    except requests.RequestException as exc:
        log.error("Failed to get timezone offset from API: %s", exc)
        return None
    try:
        doc = response.json()
    except ValueError:
        log.error("Deserialization error on timezone offset API response")
        return None
    offset = _as_int(doc.get("gmtOffset") if isinstance(doc, dict) else None)
    log.info("Timezone offset from API: %d", offset)
    return offset


class GlobalTime:
    """Broken-down local time, refreshed at most once a second."""

    def __init__(
        self,
        epoch_source: Optional[Callable[[], float]] = None,
        clock: Optional[Callable[[], int]] = None,
        format_24_hour: bool = True,
        offset_source: Optional[Callable[[], Optional[int]]] = None,
    ) -> None:
        self._epoch_source = epoch_source or time.time
        self._clock = clock or _millis
        self._offset_source = offset_source
        self._format_24_hour = format_24_hour
        self.timezone_offset: Optional[int] = None if offset_source is not None else 0
        self._update_timer = 0
        self.unix_epoch = 0
        self.hour = 0
        self.minute = 0
        self.second = 0
        self.day = 0
        self.month = 0
        self.month_name = ""
        self.year = 0
        self.time = ""
        self.weekday = ""

    @property
    def format_24_hour(self) -> bool:
        return self._format_24_hour

    @format_24_hour.setter
    def format_24_hour(self, value: bool) -> None:
        self._format_24_hour = value

    def update_time(self) -> None:
        now = self._clock()
        if now - self._update_timer <= _UPDATE_INTERVAL_MS:
            return
        if self.timezone_offset is None and self._offset_source is not None:
            self.timezone_offset = self._offset_source()
        offset = self.timezone_offset or 0
        self.unix_epoch = int(self._epoch_source()) + offset
        self._update_timer = now

        moment = datetime.fromtimestamp(self.unix_epoch, timezone.utc)
        self.minute = moment.minute
        if self._format_24_hour:
            self.hour = moment.hour
        else:
            self.hour = moment.hour % 12 or 12
        self.second = moment.second
        self.day = moment.day
        self.month = moment.month
        self.month_name = MONTH_NAMES[moment.month - 1]
        self.year = moment.year
        self.weekday = WEEKDAY_NAMES[moment.weekday()]
        self.time = f"{self.hour}:{self.minute:02d}"

    def hour_padded(self) -> str:
        return f"{self.hour:02d}"

    def minute_padded(self) -> str:
        return f"{self.minute:02d}"

    def is_pm(self) -> bool:
        return datetime.fromtimestamp(self.unix_epoch, timezone.utc).hour >= 12