"""Correction passes for killmails with known data-entry errors.

A pass takes a parsed Report, fixes the affected Participant fields in place
and returns the same Report, so passes chain in any order.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from killmail.config import Settings
from killmail.models import NO_FACTION, Participant, Report
from killmail.parser import parse_killmail

logger = logging.getLogger("killmail")

Rewriter = Callable[[Report], Report]

FW_FACTIONS = ("Amarr Empire", "Minmatar Republic", "Caldari State", "Gallente Federation")


def _participants(report: Report) -> Iterable[Participant]:
    yield report.victim
    yield from report.attackers


def make_faction_alliance_pass(factions: Sequence[str] = FW_FACTIONS) -> Rewriter:
    """Build a pass that moves a faction name out of the alliance field."""
    known = frozenset(factions)

    def faction_alliance(report: Report) -> Report:
        for p in _participants(report):
            if p.alliance in known:
                logger.info(
                    "Killmail %s: moved faction %r out of alliance for %s %r",
                    report.timestamp,
                    p.alliance,
                    p.role,
                    p.name,
                )
                p.faction = p.alliance
                p.alliance = NO_FACTION
        return report

    return faction_alliance


faction_alliance = make_faction_alliance_pass()

REWRITERS: Dict[str, Rewriter] = {
    "faction_alliance": faction_alliance,
}


def resolve_passes(names: Iterable[str], settings: Optional[Settings] = None) -> List[Rewriter]:
    """Look up passes by name; the faction pass honours configured faction names."""
    passes: List[Rewriter] = []
    for name in names:
        if name not in REWRITERS:
            raise KeyError(f"unknown rewriter: {name}")
        if name == "faction_alliance" and settings is not None:
            passes.append(make_faction_alliance_pass(settings.fw_factions))
            continue
        passes.append(REWRITERS[name])
    return passes


def apply_rewriters(report: Report, passes: Iterable[Rewriter]) -> Report:
    for rw in passes:
        report = rw(report)
    return report


def rewrite_killmail(
    text: str,
    passes: Optional[Iterable[Rewriter]] = None,
    settings: Optional[Settings] = None,
) -> Report:
    """Parse text and run correction passes over the result (configured passes by default)."""
    report = parse_killmail(text)
    if passes is None:
        s = settings or Settings.from_env()
        passes = resolve_passes(s.rewriters, s)
    return apply_rewriters(report, passes)


def fix_factional_warfare_alliances(text: str) -> Report:
    return rewrite_killmail(text, passes=[faction_alliance])
