"""WebVTT → SRT timestamp normalization.

WHY: VTT timestamps use ``.`` before the milliseconds and may omit the
hour field (``01:02.500``). SRT requires ``HH:MM:SS,mmm`` with every
field present.

HOW: Prepend ``00:`` when only two colon fields exist, swap the final
``.`` for ``,``, then left-pad each colon field to two digits.

RULES:
- Input is a timestamp already matched by the parser's grammar
- Fields longer than two digits (e.g. 100-hour marks) are preserved
- Already formatted timestamps pass through unchanged
"""

from __future__ import annotations

import re

_MILLIS_RE = re.compile(r"\.(\d{3})$")


def format_timestamp(value: str) -> str:
    """Convert a VTT timestamp into SRT form.

    Examples:
        >>> format_timestamp("1:02.500")
        '00:01:02,500'
        >>> format_timestamp("1:00:00.000")
        '01:00:00,000'
    """
    stamp = value.strip()
    if stamp.count(":") == 1:
        stamp = "00:" + stamp
    stamp = _MILLIS_RE.sub(r",\1", stamp)
    return ":".join(field.zfill(2) for field in stamp.split(":"))
