"""Tests for Entity and Player models."""

import pytest
from pydantic import ValidationError

from crawler.sim.core.entities import Entity, Player


# ---------------------------------------------------------------------------
# Entity -- take_damage
# ---------------------------------------------------------------------------

class TestEntityTakeDamage:
    def test_defense_reduces_damage(self):
        entity = Entity(name="Test", max_health=50, health=50, defense=3)
        lost = entity.take_damage(10)

        assert lost == 7
        assert entity.health == 43

    def test_defense_never_fully_blocks(self):
        entity = Entity(name="Test", max_health=50, health=50, defense=20)
        lost = entity.take_damage(5)

        assert lost == 1
        assert entity.health == 49

    def test_zero_damage_still_deals_one(self):
        entity = Entity(name="Test", max_health=50, health=50)
        assert entity.take_damage(0) == 1
        assert entity.health == 49

    def test_health_floors_at_zero(self):
        entity = Entity(name="Test", max_health=50, health=5)
        lost = entity.take_damage(40)

        assert lost == 5
        assert entity.health == 0
        assert not entity.is_alive

    def test_negative_damage_raises(self):
        entity = Entity(name="Test", max_health=50, health=50)
        with pytest.raises(ValueError):
            entity.take_damage(-1)

    def test_damage_formula_holds_across_values(self):
        for health in (1, 7, 30):
            for defense in (0, 2, 8):
                for amount in (0, 1, 5, 10, 50):
                    entity = Entity(
                        name="Test", max_health=30, health=health, defense=defense,
                    )
                    entity.take_damage(amount)
                    assert entity.health == max(0, health - max(1, amount - defense))


class TestEntityLoseHealth:
    def test_bypasses_defense(self):
        entity = Entity(name="Test", max_health=50, health=50, defense=10)
        assert entity.lose_health(25) == 25
        assert entity.health == 25

    def test_capped_at_current_health(self):
        entity = Entity(name="Test", max_health=50, health=10)
        assert entity.lose_health(25) == 10
        assert entity.health == 0


# ---------------------------------------------------------------------------
# Entity -- heal
# ---------------------------------------------------------------------------

class TestEntityHeal:
    def test_heal_caps_at_max_health(self):
        entity = Entity(name="Test", max_health=50, health=40)
        assert entity.heal(20) == 10
        assert entity.health == 50

    def test_heal_within_bounds(self):
        entity = Entity(name="Test", max_health=50, health=20)
        assert entity.heal(15) == 15
        assert entity.health == 35

    def test_negative_heal_raises(self):
        entity = Entity(name="Test", max_health=50, health=20)
        with pytest.raises(ValueError):
            entity.heal(-5)


class TestEntityValidation:
    def test_health_above_max_rejected(self):
        with pytest.raises(ValidationError):
            Entity(name="Test", max_health=10, health=11)

    def test_negative_health_rejected(self):
        with pytest.raises(ValidationError):
            Entity(name="Test", max_health=10, health=-1)

    def test_glyph_must_be_one_character(self):
        with pytest.raises(ValidationError):
            Entity(name="Test", max_health=10, health=10, glyph="ab")

    def test_set_position(self):
        entity = Entity(name="Test", max_health=10, health=10)
        entity.set_position(4, 7)
        assert entity.position == (4, 7)


# ---------------------------------------------------------------------------
# Player
# ---------------------------------------------------------------------------

class TestPlayerDefaults:
    def test_starting_stats(self):
        player = Player()
        assert player.name == "Hero"
        assert (player.health, player.max_health) == (100, 100)
        assert (player.attack, player.defense) == (15, 5)
        assert (player.mana, player.max_mana) == (50, 50)
        assert player.level == 1
        assert player.experience == 0
        assert player.glyph == "@"

    def test_three_abilities(self):
        player = Player()
        assert [a.name for a in player.abilities] == ["Cleave", "Heal", "Fire Blast"]

    def test_abilities_not_shared_between_players(self):
        a, b = Player(), Player()
        a.abilities[0].use()
        assert b.abilities[0].is_ready

    def test_mana_above_max_rejected(self):
        with pytest.raises(ValidationError):
            Player(mana=60, max_mana=50)


class TestPlayerExperience:
    def test_below_threshold_no_level(self):
        player = Player()
        assert player.gain_experience(99) == []
        assert player.level == 1
        assert player.experience == 99

    def test_exact_threshold_levels_up(self):
        player = Player()
        assert player.gain_experience(100) == [2]
        assert player.level == 2
        assert player.experience == 0

    def test_level_up_stats(self):
        player = Player(health=30, mana=5)
        player.gain_experience(100)

        assert player.max_health == 120
        assert player.health == 120
        assert player.attack == 18
        assert player.defense == 7
        assert player.max_mana == 60
        assert player.mana == 60

    def test_cascading_level_ups(self):
        player = Player()
        # 100 to reach level 2, 200 more to reach level 3, 50 left over.
        assert player.gain_experience(350) == [2, 3]
        assert player.level == 3
        assert player.experience == 50
        assert player.experience < player.level * 100
        assert player.max_health == 140
        assert player.attack == 21
        assert player.defense == 9
        assert player.max_mana == 70

    def test_next_level_xp(self):
        player = Player(level=4)
        assert player.next_level_xp == 400


class TestPlayerMana:
    def test_spend_mana(self):
        player = Player()
        assert player.spend_mana(20)
        assert player.mana == 30

    def test_spend_mana_insufficient_is_noop(self):
        player = Player(mana=10)
        assert not player.spend_mana(15)
        assert player.mana == 10

    def test_restore_mana_caps(self):
        player = Player(mana=45)
        assert player.restore_mana(20) == 5
        assert player.mana == 50

    def test_tick_abilities(self):
        player = Player()
        player.abilities[0].use()
        player.tick_abilities()
        assert player.abilities[0].current_cooldown == 2
        assert player.abilities[1].current_cooldown == 0
