"""Calendar link generation module."""

from .form import FORM_FIELDS, FormState, apply_change
from .links import EventDetails, GeneratedLinks, generate_links

__all__ = [
    "EventDetails",
    "GeneratedLinks",
    "generate_links",
    "FormState",
    "FORM_FIELDS",
    "apply_change",
]
