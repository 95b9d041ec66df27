"""
Tests for random team name generation
"""
import random

from scorekeeper.name_generator import (
    FIRST_WORDS,
    SECOND_WORDS,
    generate_team_name,
    make_plural,
)


def test_plural_consonant_y():
    """Consonant + y → ies"""
    assert make_plural("Galaxy") == "Galaxies"


def test_plural_vowel_y():
    """Vowel + y keeps the y"""
    assert make_plural("Day") == "Days"


def test_plural_sibilant():
    assert make_plural("Phoenix") == "Phoenixes"
    assert make_plural("Walrus") == "Walruses"
    assert make_plural("Witch") == "Witches"


def test_plural_consonant_o():
    assert make_plural("Tornado") == "Tornadoes"
    assert make_plural("Rodeo") == "Rodeos"


def test_plural_irregular():
    assert make_plural("Goose") == "Geese"
    assert make_plural("Person") == "People"


def test_plural_suffix_rules_win_over_irregulars():
    """Fish matches the -sh rule before the irregular table"""
    assert make_plural("Fish") == "Fishes"


def test_plural_default():
    assert make_plural("Falcon") == "Falcons"


def test_generated_name_shape():
    """Name is '<Adjective> <plural noun>' from the word lists"""
    rng = random.Random(7)
    plurals = {make_plural(w) for w in SECOND_WORDS}
    for _ in range(50):
        first, second = generate_team_name(rng).split(" ")
        assert first in FIRST_WORDS
        assert second in plurals


def test_generated_name_deterministic_with_seed():
    assert generate_team_name(random.Random(3)) == generate_team_name(random.Random(3))
