"""Core business logic layer.

Subpackages:
- scheduling: delivery dates and order cutoff
- shopping: building shopping lists
- orders: order items from selections, order slips
"""
__all__ = ["scheduling", "shopping", "orders"]
