"""Inventory and order management backend for a small fashion business."""

__version__ = "0.1.0"
