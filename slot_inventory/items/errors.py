# slot_inventory/items/errors.py
"""
Failure kinds for inventory operations.
Operations report these through return values and Inventory.last_error, never by raising.
"""
from enum import Enum

class InventoryError(Enum):
    OUT_OF_CAPACITY = "out_of_capacity"      # Slot index >= capacity, or no eligible slot found
    INVALID_REFERENCE = "invalid_reference"  # Missing stack/inventory, or stack in the wrong place
    INVALID_SPLIT = "invalid_split"          # Split preconditions unmet
    NOT_STACKABLE = "not_stackable"          # Merge attempted across different item ids
