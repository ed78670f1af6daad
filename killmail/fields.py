from __future__ import annotations

import regex as re
from typing import List, Optional, Sequence

from killmail.models import NO_FACTION, Item, Participant


FINAL_BLOW_MARKER = "(laid the final blow)"
CARGO_MARKER = "(Cargo)"
DRONE_BAY_MARKER = "(Drone Bay)"

# Shortest line that can still describe an item.
MIN_ITEM_LINE = 3

_RX_INT = re.compile(r"^[-+]?\d+")
_RX_FLOAT = re.compile(r"^[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?")
_RX_QTY = re.compile(r"Qty:\s*(?P<qty>\d+)")
_RX_ITEM_NAME = re.compile(r"^(?P<name>[^,(\r\n]*)")


# -----------------
# Helpers
# -----------------


def as_lines(text: str | Sequence[str]) -> List[str]:
    if isinstance(text, str):
        return text.splitlines()
    return list(text)


def find_line(keyword: str, lines: Sequence[str]) -> Optional[str]:
    """First line containing keyword (case-sensitive substring), like grep."""
    for ln in lines:
        if keyword in ln:
            return ln
    return None


def field_value(keyword: str, lines: Sequence[str]) -> Optional[str]:
    """Value of a 'Keyword: value' line, or None when no such line exists."""
    needle = f"{keyword}:"
    ln = find_line(needle, lines)
    if ln is None:
        return None
    return ln.split(needle, 1)[1].strip()


def _parse_int(s: Optional[str], default: int = 0) -> int:
    m = _RX_INT.match((s or "").strip())
    if not m:
        return default
    return int(m.group(0))


def _parse_float(s: Optional[str], default: float = 0.0) -> float:
    m = _RX_FLOAT.match((s or "").strip())
    if not m:
        return default
    return float(m.group(0))


def _text(keyword: str, lines: Sequence[str]) -> str:
    return field_value(keyword, lines) or ""


def _faction(lines: Sequence[str]) -> str:
    v = field_value("Faction", lines)
    return v if v is not None else NO_FACTION


# -----------------
# Participants
# -----------------


def extract_victim(block: str | Sequence[str]) -> Participant:
    lines = as_lines(block)
    return Participant(
        role="victim",
        name=_text("Victim", lines),
        security_status=_parse_float(field_value("Security", lines)),
        corporation=_text("Corp", lines),
        alliance=_text("Alliance", lines),
        faction=_faction(lines),
        ship_destroyed=_text("Destroyed", lines),
        system=_text("System", lines),
        moon=_text("Moon", lines),
        damage_taken=_parse_int(field_value("Damage Taken", lines)),
    )


def extract_attacker(block: str | Sequence[str]) -> Participant:
    lines = as_lines(block)
    final_blow = find_line(FINAL_BLOW_MARKER, lines) is not None
    name = _text("Name", lines).replace(FINAL_BLOW_MARKER, "").strip()
    return Participant(
        role="attacker",
        name=name,
        security_status=_parse_float(field_value("Security", lines)),
        corporation=_text("Corp", lines),
        alliance=_text("Alliance", lines),
        faction=_faction(lines),
        ship=_text("Ship", lines),
        weapon=_text("Weapon", lines),
        damage_done=_parse_int(field_value("Damage Done", lines)),
        final_blow=final_blow,
    )


# -----------------
# Items
# -----------------


def extract_item(line: str) -> Optional[Item]:
    """Parse one destroyed/dropped line, e.g. 'Tritanium, Qty: 500 (Cargo)'.

    Returns None for lines too short to name an item; callers skip those.
    """
    s = (line or "").rstrip("\r\n")
    if len(s) < MIN_ITEM_LINE:
        return None

    m = _RX_ITEM_NAME.match(s)
    name = m.group("name").strip() if m else ""
    if not name:
        return None

    mq = _RX_QTY.search(s)
    return Item(
        name=name,
        # "Qty: 0" still names one item; the printer omits quantities of 1
        quantity=max(1, int(mq.group("qty"))) if mq else 1,
        in_cargo=CARGO_MARKER in s,
        in_drone_bay=DRONE_BAY_MARKER in s,
    )


def extract_items(lines: Sequence[str]) -> List[Item]:
    out: List[Item] = []
    for ln in lines:
        it = extract_item(ln)
        if it is None:
            continue
        out.append(it)
    return out
