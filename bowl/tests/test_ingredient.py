import unittest

from bowl.domain.Ingredient import Ingredient
from bowl.domain.Layer import Layer


class TestIngredient(unittest.TestCase):

    def test_from_dict_parses_numbers(self):
        ing = Ingredient.from_dict({"id": "a", "layer_id": "l", "name": "Oats", "portion_amount": "60",
                                    "package_amount": "", "unknown": 1})
        self.assertEqual(ing.portion_amount, 60.0)
        self.assertIsNone(ing.package_amount)
        self.assertEqual(ing.to_dict()["name"], "Oats")

    def test_package_display_label(self):
        self.assertEqual(Ingredient(package_label="Glas").package_display_label(), "Glas")
        self.assertEqual(Ingredient(package_amount=500.0, package_unit="g").package_display_label(), "500g")
        self.assertEqual(Ingredient(package_amount=1.5, package_unit="kg").package_display_label(), "1.5kg")
        self.assertIsNone(Ingredient().package_display_label())


class TestLayer(unittest.TestCase):

    def test_quantity_choices(self):
        self.assertEqual(Layer(quantity_options="1, 2,x,3").quantity_choices(), [1, 2, 3])
        self.assertEqual(Layer().quantity_choices(), [])

    def test_unknown_selection_type(self):
        layer = Layer.from_dict({"id": "l", "name": "Deko", "selection_type": "fancy"})
        self.assertEqual(layer.selection_type, "none")
        self.assertFalse(layer.orderable)
