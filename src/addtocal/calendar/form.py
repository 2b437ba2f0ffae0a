"""Form state for the link generator page."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import timezone, tzinfo
from typing import Optional

from .links import EventDetails, GeneratedLinks, generate_links

FORM_FIELDS = ("title", "description", "location", "start_date", "end_date")


@dataclass(frozen=True)
class FormState:
    """The entered event together with the links derived from it."""

    event: EventDetails = field(default_factory=EventDetails)
    links: GeneratedLinks = field(default_factory=GeneratedLinks.empty)

    @classmethod
    def empty(cls) -> FormState:
        return cls()


def apply_change(
    state: FormState,
    name: str,
    value: Optional[str],
    tz: tzinfo = timezone.utc,
) -> FormState:
    """
    Apply one field change and recompute every link.

    The previous state is left untouched; a new state replaces it.

    Args:
        state: Current form state.
        name: Field being edited, one of FORM_FIELDS.
        value: New field value.
        tz: Zone for date-time values without an explicit offset.

    Returns:
        New FormState.

    Raises:
        ValueError: If ``name`` is not a form field.
    """
    if name not in FORM_FIELDS:
        raise ValueError(f"Unknown form field: {name!r}")

    event = dataclasses.replace(state.event, **{name: value})
    return FormState(event=event, links=generate_links(event, tz))
