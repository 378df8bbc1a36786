import unittest

from bowl.domain.Ingredient import Ingredient
from bowl.domain.Layer import Layer
from bowl.domain.Order import OrderItem
from bowl.logic.orders.selection import InvalidSelection, build_order_items


class TestBuildOrderItems(unittest.TestCase):

    def setUp(self):
        self.layers = [
            Layer("base", "Basis", 0, "single"),
            Layer("fruit", "Obst", 1, "multiple"),
            Layer("top", "Toppings", 2, "quantity", "1,2,3"),
            Layer("info", "Hinweis", 3, "display_only"),
        ]
        self.ingredients = [
            Ingredient("oats", "base", "Haferflocken"),
            Ingredient("yogurt", "base", "Joghurt"),
            Ingredient("banana", "fruit", "Banane"),
            Ingredient("berries", "fruit", "Beeren"),
            Ingredient("nuts", "top", "Nüsse"),
            Ingredient("honey", "top", "Honig"),
        ]

    def _build(self, selection=None, quantities=None):
        return build_order_items(self.layers, self.ingredients, selection, quantities)

    def test_full_order(self):
        items = self._build(
            {"base": ["oats"], "fruit": ["banana", "berries"]},
            {"top": {"nuts": 2, "honey": 0}},
        )
        self.assertEqual(items, [
            OrderItem("oats", 1), OrderItem("banana", 1), OrderItem("berries", 1), OrderItem("nuts", 2),
        ])

    def test_empty_order(self):
        self.assertEqual(self._build(), [])

    def test_single_layer_allows_one_choice(self):
        with self.assertRaises(InvalidSelection):
            self._build({"base": ["oats", "yogurt"]})

    def test_duplicate_choice_counts_once(self):
        self.assertEqual(self._build({"fruit": ["banana", "banana"]}), [OrderItem("banana", 1)])

    def test_quantity_must_be_offered(self):
        with self.assertRaises(InvalidSelection):
            self._build(quantities={"top": {"nuts": 5}})

    def test_ingredient_from_other_layer(self):
        with self.assertRaises(InvalidSelection):
            self._build({"base": ["banana"]})

    def test_display_only_layer_is_not_orderable(self):
        with self.assertRaises(InvalidSelection):
            self._build({"info": ["oats"]})

    def test_unknown_layer(self):
        with self.assertRaises(InvalidSelection):
            self._build({"dessert": ["oats"]})

    def test_quantity_without_options_accepts_any_positive(self):
        self.layers[2].quantity_options = None
        self.assertEqual(self._build(quantities={"top": {"nuts": 7}}), [OrderItem("nuts", 7)])
