#!/usr/bin/env python3
"""
Unit tests for the artificial ant context object.
"""

import unittest

from epox.ant import Ant, AntLandscape, Orientation


class TestAntLandscape(unittest.TestCase):
    """Test cases for the toroidal food grid."""

    def test_food_placement(self):
        landscape = AntLandscape(4, 3, food_locations=[(0, 0), (3, 2)])
        self.assertEqual(landscape.food_count, 2)
        self.assertTrue(landscape.is_food_at((3, 2)))
        self.assertFalse(landscape.is_food_at((2, 2)))

    def test_wrapping(self):
        landscape = AntLandscape(4, 3)
        self.assertEqual(landscape.wrap((-1, 3)), (3, 0))
        landscape.set_food_at((5, -1))
        self.assertTrue(landscape.is_food_at((1, 2)))

    def test_remove_food(self):
        landscape = AntLandscape(2, 2, food_locations=[(1, 1)])
        landscape.remove_food_at((1, 1))
        self.assertEqual(landscape.food_count, 0)

    def test_invalid_dimensions(self):
        with self.assertRaises(ValueError):
            AntLandscape(0, 5)


class TestAnt(unittest.TestCase):
    """Test cases for ant movement and move limits."""

    def setUp(self):
        """Set up test fixtures."""
        self.landscape = AntLandscape(3, 3, food_locations=[(1, 0)])
        self.ant = Ant(self.landscape, max_moves=4)

    def test_initial_state(self):
        self.assertEqual(self.ant.location, (0, 0))
        self.assertEqual(self.ant.orientation, Orientation.EAST)
        self.assertTrue(self.ant.is_food_ahead())

    def test_move_eats_food(self):
        self.ant.move()
        self.assertEqual(self.ant.location, (1, 0))
        self.assertEqual(self.ant.food_eaten, 1)
        self.assertFalse(self.landscape.is_food_at((1, 0)))

    def test_turns_cycle(self):
        self.ant.turn_left()
        self.assertEqual(self.ant.orientation, Orientation.NORTH)
        self.ant.turn_left()
        self.assertEqual(self.ant.orientation, Orientation.WEST)
        self.ant.turn_right()
        self.ant.turn_right()
        self.assertEqual(self.ant.orientation, Orientation.EAST)

    def test_move_limit(self):
        for _ in range(10):
            self.ant.move()
        self.assertEqual(self.ant.moves, 4)
        self.assertEqual(self.ant.location, (1, 0))
        self.assertFalse(self.ant.can_act())

        self.ant.turn_left()
        self.ant.skip()
        self.assertEqual(self.ant.orientation, Orientation.EAST)
        self.assertEqual(self.ant.moves, 4)

    def test_reset(self):
        self.ant.move()
        self.ant.reset(location=(2, 2), orientation=Orientation.SOUTH)
        self.assertEqual(self.ant.location, (2, 2))
        self.assertEqual(self.ant.orientation, Orientation.SOUTH)
        self.assertEqual(self.ant.moves, 0)
        self.assertEqual(self.ant.food_eaten, 0)
        self.assertEqual(self.ant.location_ahead(), (2, 0))


if __name__ == '__main__':
    unittest.main()
