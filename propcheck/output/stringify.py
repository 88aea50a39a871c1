"""Value-to-text rendering used in every report."""

from typing import Any


def stringify(value: Any) -> str:
    """Render a value for reports. Never raises."""
    try:
        return repr(value)
    except Exception:
        return object.__repr__(value)
