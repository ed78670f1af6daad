import pytest


FULL_MAIL = """2010.06.14 18:22

Victim: Kara Thrace
Corp: Colonial Fleet
Alliance: Caldari State
Faction: NONE
Destroyed: Merlin
System: Tama
Security: 0.3
Damage Taken: 4821

Involved parties:

Name: Leoben Conoy (laid the final blow)
Security: -5.2
Corp: Cylon Raiders
Alliance: Gallente Federation
Faction: NONE
Ship: Incursus
Weapon: Light Neutron Blaster II
Damage Done: 3100

Name: Simon O'Neill
Security: 0.0
Corp: Cylon Raiders
Alliance: Shipyard Pirates
Ship: Atron
Weapon: Hobgoblin I
Damage Done: 1721

Destroyed items:

Light Ion Blaster II, Qty: 2
Warrior II (Drone Bay)
Antimatter Charge S, Qty: 200 (Cargo)

Dropped items:

Tritanium, Qty: 500 (Cargo)
1MN Afterburner II
"""

NO_ATTACKERS_MAIL = """2011.01.02 00:05

Victim: Solo Hauler
Corp: Haul Co
Destroyed: Badger
System: Uedama
Security: 0.5
Damage Taken: 900

Destroyed items:

Cargo Container
"""

DROPPED_ONLY_MAIL = """2012.03.04 05:06:07

Victim: Lucky Pilot
Corp: Fortune Inc
Destroyed: Ibis
System: Rancer
Security: 0.4
Damage Taken: 300

Involved parties:

Name: Gate Camper (laid the final blow)
Security: -10.0
Corp: Camp Corp
Ship: Thrasher
Weapon: 280mm Howitzer Artillery II
Damage Done: 300

Dropped items:

Civilian Miner
"""


@pytest.fixture
def full_mail():
    return FULL_MAIL


@pytest.fixture
def no_attackers_mail():
    return NO_ATTACKERS_MAIL


@pytest.fixture
def dropped_only_mail():
    return DROPPED_ONLY_MAIL
