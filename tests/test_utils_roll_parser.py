"""
Tests for roll expression parsing
"""
from models.character import Character
from models.roll import RollModifier
from utils.roll_parser import extract_again_token, is_direct_pool, parse_attribute_roll


class TestExtractAgainToken:
    """Test pulling the re-roll keyword out of an expression."""

    def test_token_removed(self):
        assert extract_again_token("strength + 1 9again") == ("strength + 1", "9again")

    def test_no_token(self):
        assert extract_again_token("strength + 1") == ("strength + 1", None)

    def test_only_first_token_removed(self):
        line, token = extract_again_token("4 8again no10again")
        assert token == "8again"
        assert line == "4 no10again"

    def test_embedded_text_is_not_a_token(self):
        line, token = extract_again_token("my9againstat + 2")
        assert token is None
        assert line == "my9againstat + 2"


class TestIsDirectPool:
    """Test the boundary between direct pools and attribute expressions."""

    def test_bare_counts(self):
        assert is_direct_pool("4")
        assert is_direct_pool("  10 ")
        assert is_direct_pool("0")

    def test_counts_with_modifier(self):
        assert is_direct_pool("10 9again")
        assert is_direct_pool("no10again 3")

    def test_chance(self):
        assert is_direct_pool("chance")
        assert is_direct_pool("chance 8again")

    def test_expressions_are_not_direct(self):
        assert not is_direct_pool("strength")
        assert not is_direct_pool("4 + 1")
        assert not is_direct_pool("strength + athletics 9again")
        assert not is_direct_pool("-2")
        assert not is_direct_pool("Chance")


class TestParseAttributeRoll:
    """Test evaluating attribute expressions against a character."""

    EXPRESSION = "  strength +  athletics- 1 9again"

    def test_unknown_attributes_default_to_zero(self):
        result = parse_attribute_roll(Character(name="Paul"), self.EXPRESSION)

        assert result.pool == -1
        assert result.modifier == RollModifier.AGAIN_9
        assert result.attributes == {}
        assert result.attributes_not_found == ["strength", "athletics"]

    def test_known_attributes(self):
        character = Character(name="Paul")
        character.set_value("strength", 3)
        character.set_value("athletics", 1)

        result = parse_attribute_roll(character, self.EXPRESSION)

        assert result.pool == 3
        assert result.modifier == RollModifier.AGAIN_9
        assert result.attributes == {"strength": 3, "athletics": 1}
        assert result.attributes_not_found == []

    def test_default_modifier(self):
        result = parse_attribute_roll(Character(name="Paul"), "wits + composure")
        assert result.modifier == RollModifier.AGAIN_10

    def test_no_again_modifier(self):
        result = parse_attribute_roll(Character(name="Paul"), "wits no10again")
        assert result.modifier == RollModifier.NO_AGAIN

    def test_names_keep_their_spelling(self):
        character = Character(name="Paul")
        character.set_value("wits", 2)

        result = parse_attribute_roll(character, "Wits + Composure")

        assert result.pool == 2
        assert result.attributes == {"Wits": 2}
        assert result.attributes_not_found == ["Composure"]

    def test_literals_only(self):
        result = parse_attribute_roll(Character(name="Paul"), "4 + 1")
        assert result.pool == 5
        assert result.attributes == {}
        assert result.attributes_not_found == []

    def test_subtracting_attributes(self):
        character = Character(name="Paul")
        character.set_value("dexterity", 4)
        character.set_value("wounds", 2)

        result = parse_attribute_roll(character, "dexterity-wounds")

        assert result.pool == 2
        assert list(result.attributes) == ["dexterity", "wounds"]

    def test_minus_applies_to_next_term_only(self):
        result = parse_attribute_roll(Character(name="Paul"), "5 - 2 3")
        assert result.pool == 6
