import unittest

from bowl.domain.ShoppingList import ShoppingList, ShoppingListLine
from bowl.infra.pdf_utils import generate_order_slips_pdf, generate_shopping_list_pdf


class TestPdfUtils(unittest.TestCase):

    def test_shopping_list_pdf(self):
        lines = [
            ShoppingListLine("oats", "Haferflocken", 3.0, 60, "g", 180.0, 1, "500g Packung"),
            ShoppingListLine("banana", "Banane", 1.5, 0.5, "Stk", 0.75),
        ]
        pdf = generate_shopping_list_pdf(ShoppingList("2026-03-09", lines))
        self.assertTrue(pdf.startswith(b"%PDF"))

    def test_empty_shopping_list_pdf(self):
        self.assertTrue(generate_shopping_list_pdf(ShoppingList("2026-03-09")).startswith(b"%PDF"))

    def test_order_slips_pdf_multiple_pages(self):
        slip = {
            "order_id": "o1", "customer": "Ada & Bob", "delivery_date": "2026-03-09",
            "delivery_label": "Montag, 9. März 2026", "room": "B12", "allergies": "Nüsse <stark>",
            "layers": [{"layer": "Basis", "sort_order": 0, "items": ["Haferflocken"]}],
        }
        pdf = generate_order_slips_pdf([dict(slip, order_id=f"o{i}") for i in range(4)])
        self.assertTrue(pdf.startswith(b"%PDF"))
        self.assertTrue(generate_order_slips_pdf([]).startswith(b"%PDF"))
