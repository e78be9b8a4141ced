# slot_inventory/items/inventory/__init__.py
"""
Inventory Package.
Manages slots, stack placement, move/swap transfers and serialization.
"""
from .core import Inventory
from .transfer import move, swap
