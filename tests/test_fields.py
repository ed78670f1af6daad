from killmail.fields import (
    extract_attacker,
    extract_item,
    extract_items,
    extract_victim,
    field_value,
    find_line,
)


class TestFindLine:
    def test_first_match_wins(self):
        lines = ["Corp: A", "Corp: B"]
        assert find_line("Corp", lines) == "Corp: A"

    def test_case_sensitive(self):
        assert find_line("corp", ["Corp: A"]) is None

    def test_missing(self):
        assert find_line("Ship", []) is None


class TestFieldValue:
    def test_strips_label(self):
        assert field_value("System", ["System: Jita  "]) == "Jita"

    def test_label_needs_colon(self):
        # a Corp value mentioning "Ship" must not satisfy the Ship lookup
        lines = ["Corp: Shipyard Inc", "Ship: Rifter"]
        assert field_value("Ship", lines) == "Rifter"

    def test_destroyed_ignores_section_marker(self):
        assert field_value("Destroyed", ["Destroyed items:", "Foo"]) is None

    def test_missing_is_none(self):
        assert field_value("Moon", ["System: Jita"]) is None


class TestExtractVictim:
    def test_fields(self):
        v = extract_victim(
            "Victim: Jon Doe\nCorp: Doe Inc\nAlliance: Doe Alliance\nFaction: Amarr Empire\n"
            "Destroyed: Punisher\nSystem: Amarr\nMoon: Amarr VIII - Moon 1\nSecurity: 1.0\nDamage Taken: 4821"
        )
        assert v.role == "victim"
        assert v.name == "Jon Doe"
        assert v.corporation == "Doe Inc"
        assert v.alliance == "Doe Alliance"
        assert v.faction == "Amarr Empire"
        assert v.ship_destroyed == "Punisher"
        assert v.system == "Amarr"
        assert v.moon == "Amarr VIII - Moon 1"
        assert v.security_status == 1.0
        assert v.damage_taken == 4821

    def test_defaults(self):
        v = extract_victim("Victim: Jon Doe")
        assert v.faction == "NONE"
        assert v.damage_taken == 0
        assert v.security_status == 0.0
        assert v.corporation == ""
        assert v.moon == ""

    def test_unparsable_numbers(self):
        v = extract_victim(["Victim: X", "Security: high", "Damage Taken: lots"])
        assert v.security_status == 0.0
        assert v.damage_taken == 0

    def test_leading_number(self):
        v = extract_victim(["Victim: X", "Security: -0.3 (outlaw)", "Damage Taken: 120 HP"])
        assert v.security_status == -0.3
        assert v.damage_taken == 120


class TestExtractAttacker:
    def test_final_blow(self):
        a = extract_attacker("Name: Red Baron (laid the final blow)\nDamage Done: 300")
        assert a.final_blow is True
        assert a.name == "Red Baron"
        assert "(laid the final blow)" not in a.name
        assert a.damage_done == 300

    def test_no_final_blow(self):
        a = extract_attacker("Name: Wingman\nShip: Rifter\nWeapon: 200mm AutoCannon I")
        assert a.final_blow is False
        assert a.name == "Wingman"
        assert a.ship == "Rifter"
        assert a.weapon == "200mm AutoCannon I"
        assert a.faction == "NONE"
        assert a.damage_done == 0

    def test_victim_fields_untouched(self):
        a = extract_attacker("Name: Wingman\nSystem: Jita")
        assert a.system == ""
        assert a.role == "attacker"


class TestExtractItem:
    def test_cargo_with_quantity(self):
        it = extract_item("Tritanium, Qty: 500 (Cargo)")
        assert it.name == "Tritanium"
        assert it.quantity == 500
        assert it.in_cargo is True
        assert it.in_drone_bay is False

    def test_drone_bay(self):
        it = extract_item("Hobgoblin I, Qty: 2 (Drone Bay)")
        assert it.name == "Hobgoblin I"
        assert it.quantity == 2
        assert it.in_drone_bay is True
        assert it.in_cargo is False

    def test_fitted_default_quantity(self):
        it = extract_item("1MN Afterburner II\r")
        assert it.name == "1MN Afterburner II"
        assert it.quantity == 1

    def test_name_stops_at_paren(self):
        assert extract_item("Warrior II (Drone Bay)").name == "Warrior II"

    def test_short_line_yields_none(self):
        assert extract_item("ab") is None
        assert extract_item("") is None

    def test_three_characters_is_an_item(self):
        it = extract_item("abc")
        assert it is not None
        assert it.name == "abc"
        assert it.quantity == 1

    def test_zero_quantity_counts_as_one(self):
        assert extract_item("Tritanium, Qty: 0").quantity == 1

    def test_nameless_line_yields_none(self):
        assert extract_item("(Cargo)") is None

    def test_extract_items_skips_blanks(self):
        items = extract_items(["Tritanium", "", "x", "Pyerite, Qty: 3"])
        assert [i.name for i in items] == ["Tritanium", "Pyerite"]
