from __future__ import annotations

from typing import List

from killmail.fields import CARGO_MARKER, DRONE_BAY_MARKER, FINAL_BLOW_MARKER
from killmail.models import Item, Participant, Report


def format_item(item: Item) -> str:
    """'Name[, Qty: n][ (Cargo)][ (Drone Bay)]'"""
    s = item.name
    if item.quantity > 1:
        s += f", Qty: {item.quantity}"
    if item.in_cargo:
        s += f" {CARGO_MARKER}"
    if item.in_drone_bay:
        s += f" {DRONE_BAY_MARKER}"
    return s


class StandardPrinter:
    """Renders a Report in the standard killmail layout understood by the parser."""

    def __init__(self) -> None:
        self._parts: List[str] = []

    @property
    def mail(self) -> str:
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.mail

    def newline(self) -> None:
        self._parts.append("\n")

    def insert(self, s: str) -> None:
        # blank rows are dropped, never padded
        row = (s or "").rstrip()
        if not row.strip():
            return
        self._parts.append(row)
        self.newline()

    def insert_item(self, item: Item) -> None:
        self.insert(format_item(item))

    def insert_victim(self, v: Participant) -> None:
        self.insert(f"Victim: {v.name}")
        self.insert(f"Alliance: {v.alliance}")
        self.insert(f"Faction: {v.faction}")
        self.insert(f"Corp: {v.corporation}")
        self.insert(f"Destroyed: {v.ship_destroyed}")
        self.insert(f"System: {v.system}")
        if v.moon:
            self.insert(f"Moon: {v.moon}")
        self.insert(f"Security: {v.security_status!r}")
        self.insert(f"Damage Taken: {v.damage_taken}")

    def insert_attacker(self, a: Participant) -> None:
        name = f"{a.name} {FINAL_BLOW_MARKER}" if a.final_blow else a.name
        self.insert(f"Name: {name}")
        self.insert(f"Security: {a.security_status!r}")
        self.insert(f"Alliance: {a.alliance}")
        self.insert(f"Faction: {a.faction}")
        self.insert(f"Corp: {a.corporation}")
        self.insert(f"Ship: {a.ship}")
        self.insert(f"Weapon: {a.weapon}")
        self.insert(f"Damage Done: {a.damage_done}")

    def render(self, report: Report) -> str:
        self._parts = []
        self.insert(report.timestamp)
        self.newline()
        self.insert_victim(report.victim)
        self.newline()
        self.insert("Involved parties:")
        self.newline()
        for a in report.attackers:
            self.insert_attacker(a)
            self.newline()
        self.newline()
        self.insert("Destroyed items:")
        self.newline()
        for it in report.destroyed:
            self.insert_item(it)
        self.newline()
        self.insert("Dropped items:")
        self.newline()
        for it in report.dropped:
            self.insert_item(it)
        return self.mail


def render_killmail(report: Report) -> str:
    return StandardPrinter().render(report)
