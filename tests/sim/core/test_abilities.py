"""Tests for the ability catalog and cooldown lifecycle."""

import pytest
from pydantic import ValidationError

from crawler.sim.core.abilities import Ability, AbilityType, default_abilities


class TestAbilityCooldown:
    def test_starts_ready(self):
        ability = Ability(name="Test", ability_type=AbilityType.CLEAVE, cooldown=3)
        assert ability.is_ready
        assert ability.current_cooldown == 0

    def test_use_starts_cooldown(self):
        ability = Ability(name="Test", ability_type=AbilityType.CLEAVE, cooldown=3)
        ability.use()
        assert not ability.is_ready
        assert ability.current_cooldown == 3

    def test_ready_after_exactly_cooldown_ticks(self):
        ability = Ability(name="Test", ability_type=AbilityType.HEAL, cooldown=5)
        ability.use()
        for _ in range(4):
            ability.tick()
            assert not ability.is_ready
        ability.tick()
        assert ability.is_ready

    def test_tick_never_goes_negative(self):
        ability = Ability(name="Test", cooldown=2)
        for _ in range(5):
            ability.tick()
        assert ability.current_cooldown == 0

    def test_zero_cooldown_always_ready(self):
        ability = Ability(name="Test", cooldown=0)
        ability.use()
        assert ability.is_ready

    def test_negative_cooldown_rejected(self):
        with pytest.raises(ValidationError):
            Ability(name="Test", cooldown=-1)


class TestDefaultAbilities:
    def test_catalog(self):
        abilities = default_abilities()
        summary = [(a.name, a.ability_type, a.cooldown, a.mana_cost) for a in abilities]
        assert summary == [
            ("Cleave", AbilityType.CLEAVE, 3, 15),
            ("Heal", AbilityType.HEAL, 5, 20),
            ("Fire Blast", AbilityType.FIRE_BLAST, 4, 25),
        ]

    def test_fresh_copies(self):
        first = default_abilities()
        first[0].use()
        assert default_abilities()[0].is_ready
