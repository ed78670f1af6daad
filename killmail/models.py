from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


NO_FACTION = "NONE"


@dataclass
class Participant:
    role: str  # victim | attacker
    name: str = ""
    security_status: float = 0.0
    corporation: str = ""
    alliance: str = ""
    faction: str = NO_FACTION

    # victim only
    ship_destroyed: str = ""
    system: str = ""
    moon: str = ""
    damage_taken: int = 0

    # attacker only
    ship: str = ""
    weapon: str = ""
    damage_done: int = 0
    final_blow: bool = False

    @property
    def is_victim(self) -> bool:
        return self.role == "victim"


@dataclass
class Item:
    name: str
    quantity: int = 1
    in_cargo: bool = False
    in_drone_bay: bool = False


@dataclass
class Report:
    timestamp: str
    victim: Participant
    attackers: List[Participant] = field(default_factory=list)
    destroyed: List[Item] = field(default_factory=list)
    dropped: List[Item] = field(default_factory=list)

    @property
    def items(self) -> List[Item]:
        """Destroyed items followed by dropped items."""
        return list(self.destroyed) + list(self.dropped)

    @property
    def final_blow(self) -> Participant | None:
        for a in self.attackers:
            if a.final_blow:
                return a
        return None
