"""Small shared utility helpers used across report modules."""

from enum import Enum
from typing import Any


def label_of(tag: Any) -> str:
    """Return the external string label of a resource kind or event category."""

    if isinstance(tag, Enum):
        return tag.name
    return str(tag)
