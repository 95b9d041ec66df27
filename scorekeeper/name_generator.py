"""
Random team name generator

Names combine an adjective from FIRST_WORDS with a pluralised noun from
SECOND_WORDS, e.g. "Cosmic Phoenixes".
"""
import random
import re
from typing import Optional

# Adjectives and colors
FIRST_WORDS = [
    "Mighty", "Fierce", "Swift", "Bright", "Brave",
    "Clever", "Bold", "Daring", "Grand", "Royal",
    "Rapid", "Golden", "Silver", "Crimson", "Emerald",
    "Noble", "Mystic", "Glorious", "Radiant", "Epic",
    "Electric", "Cosmic", "Flaming", "Dynamic", "Raging",
    "Stellar", "Iron", "Bronze", "Shadow", "Stealth",
    "Quantum", "Atomic", "Blazing", "Frozen", "Thunder",
    "Lightning", "Sapphire", "Diamond", "Crystal", "Obsidian",
]

# Animals, objects and roles
SECOND_WORDS = [
    "Falcon", "Tiger", "Wolf", "Eagle", "Bear",
    "Lion", "Dragon", "Shark", "Phoenix", "Hawk",
    "Panther", "Jaguar", "Cobra", "Viper", "Rhino",
    "Knight", "Ninja", "Warrior", "Wizard", "Titan",
    "Pirate", "Viking", "Hunter", "Ranger", "Champion",
    "Gladiator", "Samurai", "Spartan", "Archer", "Guardian",
    "Cyclone", "Storm", "Tempest", "Hurricane", "Tornado",
    "Comet", "Meteor", "Star", "Planet", "Galaxy",
]

IRREGULAR_PLURALS = {
    "Person": "People",
    "Man": "Men",
    "Woman": "Women",
    "Child": "Children",
    "Tooth": "Teeth",
    "Foot": "Feet",
    "Goose": "Geese",
    "Mouse": "Mice",
    "Ox": "Oxen",
    "Deer": "Deer",
    "Sheep": "Sheep",
    "Fish": "Fish",
    "Moose": "Moose",
}

_VOWELS = set("aeiouAEIOU")
_SIBILANT_END = re.compile(r"(s|x|z|ch|sh)$", re.IGNORECASE)


def make_plural(word: str) -> str:
    """
    Pluralise an English noun with a handful of common rules

    Suffix rules win over the irregular table, so "Ox" becomes "Oxes"
    and "Fish" becomes "Fishes".

    Example:
        >>> make_plural("Galaxy")
        'Galaxies'
        >>> make_plural("Tornado")
        'Tornadoes'
    """
    if len(word) > 1 and word.endswith("y") and word[-2] not in _VOWELS:
        return word[:-1] + "ies"

    if _SIBILANT_END.search(word):
        return word + "es"

    if len(word) > 1 and word.endswith("o") and word[-2] not in _VOWELS:
        return word + "es"

    if word in IRREGULAR_PLURALS:
        return IRREGULAR_PLURALS[word]

    return word + "s"


def generate_team_name(rng: Optional[random.Random] = None) -> str:
    """Pick a random "<Adjective> <Nouns>" team name"""
    rng = rng or random
    first = rng.choice(FIRST_WORDS)
    second = rng.choice(SECOND_WORDS)
    return f"{first} {make_plural(second)}"
