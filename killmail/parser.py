from __future__ import annotations

import logging
import regex as re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from killmail.fields import extract_attacker, extract_items, extract_victim, find_line
from killmail.models import Report

logger = logging.getLogger("killmail")


MARKER_INVOLVED = "Involved parties"
MARKER_DESTROYED = "Destroyed items"
MARKER_DROPPED = "Dropped items"
SECTION_MARKERS = (MARKER_INVOLVED, MARKER_DESTROYED, MARKER_DROPPED)


# Killmail date line, e.g. "2008.01.01 12:34" or "2008-01-01 12:34:56".
# Must end the line; a bare 4-digit run (quantities, damage) never qualifies.
_RX_TIMESTAMP = re.compile(
    r"""
    (?<!\d)
    (?P<ts>
        \d{4}[./\-]\d{2}[./\-]\d{2}
        (?:[ T]\d{2}:\d{2}(?::\d{2})?)?
    )
    [ \t\r]*$
    """,
    re.MULTILINE | re.VERBOSE,
)

# One or more blank (or whitespace-only) lines, LF or CRLF.
_RX_PARAGRAPH_BREAK = re.compile(r"\r?\n(?:[ \t]*\r?\n)+")


class KillmailParseError(ValueError):
    """A mandatory part of the killmail (timestamp, victim) is missing."""

    def __init__(self, field_name: str, message: str) -> None:
        super().__init__(f"{field_name}: {message}")
        self.field = field_name


@dataclass(frozen=True)
class Markers:
    """Paragraph index of each section marker; None when the marker is absent."""

    involved: Optional[int] = None
    destroyed: Optional[int] = None
    dropped: Optional[int] = None

    def located(self) -> List[int]:
        return sorted(i for i in (self.involved, self.destroyed, self.dropped) if i is not None)


@dataclass
class Sections:
    header: List[str] = field(default_factory=list)  # victim lines
    attackers: List[str] = field(default_factory=list)  # one paragraph per attacker
    destroyed: List[str] = field(default_factory=list)  # item lines
    dropped: List[str] = field(default_factory=list)  # item lines


# -----------------
# Segmentation
# -----------------


def extract_timestamp(text: str) -> Optional[str]:
    ts = None
    for m in _RX_TIMESTAMP.finditer(text or ""):
        ts = m.group("ts")
    return ts


def split_paragraphs(text: str) -> List[str]:
    parts = _RX_PARAGRAPH_BREAK.split(text or "")
    return [p.strip("\r\n") for p in parts if p.strip()]


def _is_marker_line(line: str, marker: str) -> bool:
    # a marker heads its own line; values such as "Corp: Dropped items Inc" never qualify
    return line.strip().startswith(marker)


def _has_marker(line: str) -> bool:
    return any(_is_marker_line(line, m) for m in SECTION_MARKERS)


def find_markers(paragraphs: Sequence[str]) -> Markers:
    found = {}
    for i, para in enumerate(paragraphs):
        for ln in para.splitlines():
            for marker in SECTION_MARKERS:
                if marker not in found and _is_marker_line(ln, marker):
                    found[marker] = i
    return Markers(
        involved=found.get(MARKER_INVOLVED),
        destroyed=found.get(MARKER_DESTROYED),
        dropped=found.get(MARKER_DROPPED),
    )


def _lines_after_marker(paragraph: str, marker: str) -> List[str]:
    """Lines that follow the marker line inside its own paragraph, up to any other marker."""
    lines = paragraph.splitlines()
    out: List[str] = []
    seen = False
    for ln in lines:
        if not seen:
            seen = _is_marker_line(ln, marker)
            continue
        if _has_marker(ln):
            break
        out.append(ln)
    return out


def _lines_before_marker(paragraph: str) -> List[str]:
    out: List[str] = []
    for ln in paragraph.splitlines():
        if _has_marker(ln):
            break
        out.append(ln)
    return out


def _section_blocks(paragraphs: Sequence[str], start: Optional[int], marker: str, markers: Markers) -> List[str]:
    """Paragraphs of one section: from its marker up to the next located marker or end of input."""
    if start is None:
        return []

    end = next((i for i in markers.located() if i > start), len(paragraphs))
    blocks: List[str] = []
    head = _lines_after_marker(paragraphs[start], marker)
    if any(ln.strip() for ln in head):
        blocks.append("\n".join(head))
    blocks.extend(paragraphs[start + 1 : end])
    if end < len(paragraphs):
        # lines sharing the next marker's paragraph still belong here
        tail = _lines_before_marker(paragraphs[end])
        if any(ln.strip() for ln in tail):
            blocks.append("\n".join(tail))
    return blocks


def _block_lines(blocks: Sequence[str]) -> List[str]:
    out: List[str] = []
    for b in blocks:
        out.extend(b.splitlines())
    return out


def resolve_sections(paragraphs: Sequence[str], markers: Optional[Markers] = None) -> Sections:
    """Split paragraphs into victim header, attacker blocks and item lines.

    Range policy:
      - a section starts right after its marker line and runs to the next
        located marker (or end of input)
      - an absent marker means an empty section, never an inferred range
      - a marker at paragraph 0 is a real marker
    """
    mk = markers if markers is not None else find_markers(paragraphs)
    located = mk.located()

    if located:
        first = located[0]
        header = _block_lines(paragraphs[:first]) + _lines_before_marker(paragraphs[first])
    else:
        header = _block_lines(paragraphs)

    return Sections(
        header=header,
        attackers=_section_blocks(paragraphs, mk.involved, MARKER_INVOLVED, mk),
        destroyed=_block_lines(_section_blocks(paragraphs, mk.destroyed, MARKER_DESTROYED, mk)),
        dropped=_block_lines(_section_blocks(paragraphs, mk.dropped, MARKER_DROPPED, mk)),
    )


# -----------------
# Report
# -----------------


def parse_killmail(text: str) -> Report:
    """Parse a plain-text killmail. Raises KillmailParseError when the timestamp or victim is missing."""
    raw = text or ""

    timestamp = extract_timestamp(raw)
    if timestamp is None:
        raise KillmailParseError("timestamp", "no date token found at the end of any line")

    paragraphs = split_paragraphs(raw)
    markers = find_markers(paragraphs)
    sections = resolve_sections(paragraphs, markers)
    logger.debug(
        "Killmail %s: %d paragraphs, markers involved=%s destroyed=%s dropped=%s",
        timestamp,
        len(paragraphs),
        markers.involved,
        markers.destroyed,
        markers.dropped,
    )

    if find_line("Victim:", sections.header) is None:
        raise KillmailParseError("victim", "no 'Victim:' line ahead of the involved parties")

    report = Report(
        timestamp=timestamp,
        victim=extract_victim(sections.header),
        attackers=[extract_attacker(b) for b in sections.attackers],
        destroyed=extract_items(sections.destroyed),
        dropped=extract_items(sections.dropped),
    )
    logger.debug(
        "Killmail %s: %d attackers, %d destroyed, %d dropped",
        timestamp,
        len(report.attackers),
        len(report.destroyed),
        len(report.dropped),
    )
    return report
