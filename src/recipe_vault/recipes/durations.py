"""ISO 8601 duration formatting for recipe times."""

import re
from typing import Optional

# A run of characters closed by an H, M or S designator.
_COMPONENT_RE = re.compile(r"([^HMS]*)([HMS])")


def format_duration(iso8601: Optional[str]) -> Optional[str]:
    """Convert an ISO 8601 time duration to readable text.

    Only the time part ("PT...") is understood. Seconds are ignored, a
    component whose value is not a whole number counts as zero, and trailing
    digits without a designator are dropped.

    Args:
        iso8601: Duration such as "PT1H30M".

    Returns:
        Text such as "1 hr 30 min", or None if the input is missing,
        not a "PT" duration or has no hours or minutes.

    Examples:
        >>> format_duration("PT1H30M")
        "1 hr 30 min"
        >>> format_duration("PT2H")
        "2 hrs"
        >>> format_duration("PT1H30")
        "1 hr"
        >>> format_duration("PT45S")
        None
    """
    if not iso8601 or not iso8601.strip().startswith("PT"):
        return None

    hours = minutes = 0
    for value, designator in _COMPONENT_RE.findall(iso8601.strip()[2:]):
        amount = int(value) if value.isascii() and value.isdigit() else 0
        if designator == "H":
            hours = amount
        elif designator == "M":
            minutes = amount

    parts = []
    if hours > 0:
        parts.append(f"{hours} hr{'s' if hours > 1 else ''}")
    if minutes > 0:
        parts.append(f"{minutes} min")
    return " ".join(parts) if parts else None
