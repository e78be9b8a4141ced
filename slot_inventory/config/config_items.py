# slot_inventory/config/config_items.py
"""
Configuration for item stacks and inventories.
"""

# --- Inventory Defaults ---
DEFAULT_INVENTORY_CAPACITY = 20
DEFAULT_INVENTORY_NAME = "inventory"
EMPTY_SLOT = -1  # Slot index of a detached stack, and the "search" slot for add/move

# --- Holder Defaults ---
BACKPACK_CAPACITY = 10
BACKPACK_NAME = "backpack"
EQUIPMENT_CAPACITY = 4
EQUIPMENT_NAME = "equips"

# --- Item Definitions ---
TAG_SEPARATOR = ","
BUY_PRICE_MULTIPLIER = 2  # baseBuy = buyValue * 2, baseSell = buyValue
DEFAULT_ITEM_ICON = ""
