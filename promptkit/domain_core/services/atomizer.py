"""
Splits compound task descriptions into ordered steps.
"""

import re
from typing import Any, List

# "and" only separates when it stands alone; drag-and-drop and and/or stay whole.
SEPARATOR_PATTERN = re.compile(r",|(?<![\w/&-])and(?![\w/&-])", re.IGNORECASE)


def atomize_problem(text: Any) -> List[str]:
    """Split ``text`` on commas and the standalone word "and" into numbered steps.

    Empty segments are dropped before numbering, so step numbers are always
    contiguous starting at 1.
    """
    if not isinstance(text, str) or not text:
        return []

    segments = [segment.strip() for segment in SEPARATOR_PATTERN.split(text)]
    steps = [segment for segment in segments if segment]
    return [f"Step {index}: {step}" for index, step in enumerate(steps, start=1)]
