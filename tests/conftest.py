import pytest


class Pet:
    """Pet with an attack method."""

    def __init__(self, power):
        self.power = power

    def attack(self):
        return self.power


class Adventurer:
    """Adventurer with optional weapon, pet, and skills."""

    def __init__(self, name, health, skills=None, weapon=None, pet=None):
        self.name = name
        self.health = health
        self.skills = skills
        self.weapon = weapon
        self.pet = pet

    def attack_with_weapon(self):
        return self.weapon["damage"]

    def attack_with_pet(self):
        return self.pet.attack()


SKILLS = {
    "run": {"description": "Escapes the battle as fast as possible!"},
    "negotiate": {
        "description": "Talks to the enemy until finding an opportunity to run away",
    },
}


@pytest.fixture
def skills():
    """Skill table with two described skills."""
    return {name: dict(skill) for name, skill in SKILLS.items()}


@pytest.fixture
def adventurer(skills):
    """Adventurer with skills but no weapon and no pet."""
    return Adventurer("John", 100, skills=skills)


@pytest.fixture
def armed():
    """Adventurer carrying a sword and a llama."""
    return Adventurer(
        "Jane", 80,
        weapon={"name": "Sword", "damage": 30},
        pet=Pet(5),
    )


@pytest.fixture
def character():
    """Plain mapping version of an armed character."""
    return {
        "name": "John",
        "health": 100,
        "weapon": {"name": "Sword", "damage": 30},
    }
