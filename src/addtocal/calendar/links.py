"""Calendar "add event" link generation for Google, Outlook and Yahoo."""

from __future__ import annotations

import logging
import re
import urllib.parse
from dataclasses import asdict, dataclass
from datetime import datetime, timezone, tzinfo
from typing import Optional

logger = logging.getLogger(__name__)

GOOGLE_BASE_URL = "https://www.google.com/calendar/render"
OUTLOOK_BASE_URL = "https://outlook.live.com/owa/"
YAHOO_BASE_URL = "https://calendar.yahoo.com/"
YAHOO_VERSION = "60"

# Characters encodeURIComponent leaves alone besides letters, digits and "-_."
_SAFE_CHARS = "!~*'()"
_NON_COMPACT = re.compile(r"[^0-9TZ]")


@dataclass(frozen=True)
class EventDetails:
    """Event details as typed into the form. Every field is optional."""

    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[str] = None  # YYYY-MM-DDTHH:mm
    end_date: Optional[str] = None


@dataclass(frozen=True)
class GeneratedLinks:
    """The three provider links derived from one EventDetails."""

    google_calendar_link: str
    outlook_calendar_link: str
    yahoo_calendar_link: str

    @classmethod
    def empty(cls) -> GeneratedLinks:
        return cls("", "", "")

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


def encode(value: Optional[str]) -> str:
    """
    Percent-encode a field the way encodeURIComponent does.

    Missing values encode as the empty string.
    """
    if not value:
        return ""
    return urllib.parse.quote(value, safe=_SAFE_CHARS, errors="replace")


def parse_local_datetime(value: Optional[str], tz: tzinfo = timezone.utc) -> Optional[datetime]:
    """
    Parse a datetime-local picker value into an aware datetime.

    Naive values are interpreted in ``tz``. Returns None for absent or
    unparseable input.
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=tz)
        # Out of range once shifted to UTC
        parsed.astimezone(timezone.utc)
    except (TypeError, ValueError, OverflowError) as e:
        logger.debug(f"Ignoring unparseable date {value!r}: {e}")
        return None
    return parsed


def compact_timestamp(moment: Optional[datetime]) -> str:
    """
    Format a datetime as a compact UTC timestamp, e.g. ``20240115T120000Z``.

    The full UTC timestamp is built first and then stripped down to digits,
    ``T`` and ``Z``.
    """
    if moment is None:
        return ""
    utc = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return _NON_COMPACT.sub("", utc.isoformat(timespec="seconds") + "Z")


def generate_links(event: EventDetails, tz: tzinfo = timezone.utc) -> GeneratedLinks:
    """
    Build the Google, Outlook and Yahoo "add event" links for an event.

    Args:
        event: The event details; any field may be missing.
        tz: Zone used for date-time values without an explicit offset.

    Returns:
        GeneratedLinks with three fully formed URLs.
    """
    title = encode(event.title)
    description = encode(event.description)
    location = encode(event.location)

    start = parse_local_datetime(event.start_date, tz)
    end = parse_local_datetime(event.end_date, tz)
    compact_start = compact_timestamp(start)
    compact_end = compact_timestamp(end)

    # Outlook takes the picker value as typed
    raw_start = encode(event.start_date) if start else ""
    raw_end = encode(event.end_date) if end else ""

    dates = compact_start + ("%2F" if compact_end else "") + compact_end
    google = (
        f"{GOOGLE_BASE_URL}?action=TEMPLATE&text={title}&dates={dates}"
        f"&details={description}&location={location}"
    )

    outlook = (
        f"{OUTLOOK_BASE_URL}?path=/calendar/action/compose&rru=addevent"
        f"&subject={title}&startdt={raw_start}&enddt={raw_end}"
        f"&body={description}&location={location}"
    )

    end_fragment = f"&et={compact_end}" if compact_end else ""
    start_fragment = f"&st={compact_start}" if compact_start else ""
    yahoo = (
        f"{YAHOO_BASE_URL}?desc={description}&dur={end_fragment}"
        f"&in_loc={location}{start_fragment}&title={title}&v={YAHOO_VERSION}"
    )

    return GeneratedLinks(
        google_calendar_link=google,
        outlook_calendar_link=outlook,
        yahoo_calendar_link=yahoo,
    )
