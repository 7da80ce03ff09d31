import random
import unittest
from collections import Counter

from game import (
    CAPACITY,
    COLOR_NAMES,
    TOTAL_LEVELS,
    generate_level,
    generate_levels,
    is_solved_tube,
    level_shape,
    tubes_from_level,
)


class TestLevelGenerator(unittest.TestCase):
    def test_given_level_indices_when_shaping_then_difficulty_curve_matches(self):
        self.assertEqual(level_shape(1), (3, 2))
        self.assertEqual(level_shape(5), (3, 2))
        self.assertEqual(level_shape(6), (4, 2))
        self.assertEqual(level_shape(10), (5, 2))
        self.assertEqual(level_shape(14), (5, 2))
        self.assertEqual(level_shape(15), (6, 3))
        self.assertEqual(level_shape(30), (9, 3))
        self.assertEqual(level_shape(35), (10, 3))
        self.assertEqual(level_shape(100), (len(COLOR_NAMES), 3))

    def test_given_level_when_generated_then_four_units_per_color_and_expected_tubes(self):
        for i in (1, 6, 15, 42, 100):
            level = generate_level(i, seed=i)
            color_count, extra = level_shape(i)
            self.assertEqual(level.id, i)
            self.assertEqual(level.capacity, 4)
            self.assertEqual(len(level.tubes), color_count + extra)
            filled = level.tubes[:color_count]
            empties = level.tubes[color_count:]
            self.assertTrue(all(len(t) == CAPACITY for t in filled))
            self.assertTrue(all(len(t) == 0 for t in empties))
            counts = Counter(c for t in level.tubes for c in t)
            self.assertEqual(counts, Counter({c: 4 for c in COLOR_NAMES[:color_count]}))

    def test_given_same_seed_when_generated_then_identical_levels(self):
        self.assertEqual(generate_level(7, seed=42), generate_level(7, seed=42))
        self.assertEqual(generate_level(3, rng=random.Random(5)), generate_level(3, seed=5))

    def test_given_many_seeds_when_generated_then_tubes_keep_shuffled_order(self):
        mixed = False
        for seed in range(20):
            level = generate_level(10, seed=seed)
            tubes = tubes_from_level(level)
            if not all(is_solved_tube(t, level.capacity) for t in tubes):
                mixed = True
                break
        self.assertTrue(mixed)

    def test_given_level_when_instantiated_then_ids_are_positions(self):
        level = generate_level(2, seed=1)
        tubes = tubes_from_level(level)
        self.assertEqual([t.id for t in tubes], list(range(len(level.tubes))))
        self.assertEqual(tuple(t.layers for t in tubes), level.tubes)

    def test_given_small_palette_when_generated_then_colors_capped(self):
        level = generate_level(20, seed=0, palette=['x', 'y'])
        self.assertEqual(len(level.tubes), 2 + 3)
        self.assertEqual(set(c for t in level.tubes for c in t), {'x', 'y'})

    def test_given_invalid_index_when_generated_then_value_error(self):
        with self.assertRaises(ValueError):
            generate_level(0)

    def test_given_count_when_generating_all_then_sequential_ids(self):
        levels = generate_levels(5, seed=1)
        self.assertEqual([lv.id for lv in levels], [1, 2, 3, 4, 5])
        self.assertEqual(len(generate_levels(seed=1)), TOTAL_LEVELS)


if __name__ == '__main__':
    unittest.main(verbosity=2)
