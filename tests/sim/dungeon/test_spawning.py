"""Tests for enemy spawning and the variant roll."""

from crawler.sim.core.rng import GameRNG
from crawler.sim.dungeon.map_gen import DungeonGenerator
from crawler.sim.dungeon.spawning import roll_enemy_type, spawn_enemies
from crawler.sim.enemies import Dragon, Goblin, Orc


class TestRollEnemyType:
    def test_dragon_band_from_floor_3(self):
        assert roll_enemy_type(3, 0) == "dragon"
        assert roll_enemy_type(3, 14) == "dragon"
        assert roll_enemy_type(3, 15) == "orc"

    def test_dragon_band_falls_through_to_orc_early(self):
        for floor in (1, 2):
            assert roll_enemy_type(floor, 0) == "orc"
            assert roll_enemy_type(floor, 14) == "orc"

    def test_orc_and_goblin_bands(self):
        assert roll_enemy_type(1, 49) == "orc"
        assert roll_enemy_type(1, 50) == "goblin"
        assert roll_enemy_type(5, 99) == "goblin"


class TestSpawnEnemies:
    def test_count_scales_with_floor(self):
        gen = DungeonGenerator()
        for floor in (1, 2, 5):
            rng = GameRNG(seed=floor)
            dungeon = gen.generate(rng)
            assert len(spawn_enemies(dungeon, floor, rng)) == 3 + floor

    def test_custom_base_count(self):
        rng = GameRNG(seed=1)
        dungeon = DungeonGenerator().generate(rng)
        assert len(spawn_enemies(dungeon, 2, rng, base_count=0)) == 2

    def test_enemies_on_floor_cells(self):
        rng = GameRNG(seed=9)
        dungeon = DungeonGenerator().generate(rng)
        for enemy in spawn_enemies(dungeon, 4, rng):
            assert dungeon.is_walkable(enemy.x, enemy.y)

    def test_slot_ids_sequential(self):
        rng = GameRNG(seed=9)
        dungeon = DungeonGenerator().generate(rng)
        enemies = spawn_enemies(dungeon, 3, rng)
        assert [e.slot_id for e in enemies] == list(range(6))

    def test_no_dragons_before_floor_3(self):
        gen = DungeonGenerator()
        for seed in range(50):
            rng = GameRNG(seed=seed)
            dungeon = gen.generate(rng)
            for floor in (1, 2):
                enemies = spawn_enemies(dungeon, floor, rng)
                assert not any(isinstance(e, Dragon) for e in enemies)

    def test_dragons_appear_deeper(self):
        gen = DungeonGenerator()
        seen = set()
        for seed in range(50):
            rng = GameRNG(seed=seed)
            dungeon = gen.generate(rng)
            seen.update(type(e) for e in spawn_enemies(dungeon, 5, rng))
        assert seen == {Goblin, Orc, Dragon}

    def test_spawned_enemies_are_fresh(self):
        rng = GameRNG(seed=2)
        dungeon = DungeonGenerator().generate(rng)
        for enemy in spawn_enemies(dungeon, 1, rng):
            assert enemy.health == enemy.max_health
