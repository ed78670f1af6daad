from __future__ import annotations

import logging
from typing import List

from killmail.parser import parse_killmail
from killmail.printer import render_killmail

logger = logging.getLogger("killmail")


DEFAULT_SELFTEST_MAILS: List[str] = [
    # full mail: faction, final blow, cargo and drone bay items
    """2008.02.11 21:43

Victim: Jon Doe
Corp: Doe Industries
Alliance: NONE
Faction: Caldari State
Destroyed: Rifter
System: Jita
Security: 0.9
Damage Taken: 4821

Involved parties:

Name: Red Baron (laid the final blow)
Security: -2.5
Corp: Flying Circus
Alliance: Sky Pirates
Faction: NONE
Ship: Stabber
Weapon: 425mm AutoCannon I
Damage Done: 3000

Name: Wingman
Security: 1.2
Corp: Flying Circus
Alliance: Sky Pirates
Faction: NONE
Ship: Rifter
Weapon: Rifter
Damage Done: 1821

Destroyed items:

200mm AutoCannon I, Qty: 3
Hobgoblin I, Qty: 2 (Drone Bay)

Dropped items:

Tritanium, Qty: 500 (Cargo)
""",
    # no attackers, no dropped items, CRLF line endings
    "2009.05.01 03:00:00\r\n\r\nVictim: Lonely Miner\r\nCorp: Rocks Inc\r\nAlliance: NONE\r\n"
    "Destroyed: Retriever\r\nSystem: Amamake\r\nMoon: Amamake I - Moon 1\r\nSecurity: 0.4\r\n"
    "Damage Taken: 120\r\n\r\nDestroyed items:\r\n\r\nMiner II, Qty: 2\r\n",
]


def run_parser_selftest(samples: List[str] | None = None) -> None:
    """Parse, render and re-parse sample killmails to catch broken patterns at startup.

    Raises AssertionError when a sample does not survive the round trip.
    """
    mails = samples or DEFAULT_SELFTEST_MAILS
    for i, mail in enumerate(mails):
        report = parse_killmail(mail)
        again = parse_killmail(render_killmail(report))
        if again != report:
            raise AssertionError(f"killmail self-test sample {i} changed after print/parse round trip")

    logger.info("Parser self-test passed (%d mails).", len(mails))
