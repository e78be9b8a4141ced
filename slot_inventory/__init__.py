# slot_inventory/__init__.py
"""
Slot-based stackable item inventory.
Fixed-capacity inventories of item stacks, with move/swap transfers and a JSON codec.
"""
from slot_inventory.items.item_definition import ItemDefinition, ItemCatalog, ItemDefinitionError
from slot_inventory.items.item_stack import ItemStack
from slot_inventory.items.errors import InventoryError
from slot_inventory.items.inventory import Inventory
from slot_inventory.holder import InventoryHolder
from slot_inventory.utils.logger import Logger, LogLevel, NullLogger, RecordingLogger

__version__ = "0.1.0"
