# slot_inventory/items/inventory/persistence.py
import json
from typing import TYPE_CHECKING, Any, Dict, Optional, cast

from slot_inventory.config import DEFAULT_INVENTORY_CAPACITY, DEFAULT_INVENTORY_NAME
from slot_inventory.items.item_definition import ItemCatalog
from slot_inventory.items.item_stack import ItemStack
from slot_inventory.utils.logger import Logger

if TYPE_CHECKING:
    from slot_inventory.items.inventory.core import Inventory

class InventoryPersistenceMixin:
    """Mixin handling JSON serialization/deserialization."""

    def to_dict(self) -> Dict[str, Any]:
        """Full slot table; empty slots are None. Stack sizes are left to the catalog."""
        # Cast self to Inventory to satisfy static analysis for attribute access
        inventory = cast('Inventory', self)

        return {
            "maximumCapacity": inventory.capacity,
            "name": inventory.debug_name,
            "inventory": [stack.to_dict() if stack else None for stack in inventory.slots]
        }

    def serialize(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: Dict[str, Any], catalog: ItemCatalog,
                  logger: Optional[Logger] = None) -> 'Inventory':
        """
        Rebuilds an inventory. Each record is placed back at the slot it was read
        from, and only if its own currentSlot agrees; anything else is dropped.
        """
        # Import core here to avoid circular imports
        from .core import Inventory

        inventory = Inventory(capacity=data.get("maximumCapacity", DEFAULT_INVENTORY_CAPACITY),
                              debug_name=data.get("name", DEFAULT_INVENTORY_NAME),
                              logger=logger)

        entries = data.get("inventory") or []
        if not isinstance(entries, list):
            inventory.logger.warning(f"{inventory.debug_name}: Slot table is not a list. Loading empty.")
            entries = []

        for index, entry in enumerate(entries):
            if entry is None:
                continue
            if index >= inventory.capacity:
                inventory.logger.warning(f"{inventory.debug_name}: Ignoring records past capacity {inventory.capacity}.")
                break
            if not isinstance(entry, dict) or entry.get("currentSlot") != index:
                inventory.logger.warning(f"{inventory.debug_name}: Skipping stale record at {index}.")
                continue

            stack = ItemStack.from_dict(entry, catalog)
            if not stack:
                inventory.logger.warning(f"{inventory.debug_name}: Failed to load '{entry.get('id')}' at {index}. Leaving slot empty.")
                continue

            inventory.logger.log(f"{inventory.debug_name}: Loaded {stack} at {index}.")
            inventory.add(stack, index)

        return inventory

    @classmethod
    def deserialize(cls, text: str, catalog: ItemCatalog,
                    logger: Optional[Logger] = None) -> Optional['Inventory']:
        """Parses serialize() output. Returns None if the text is not a valid inventory."""
        try:
            data = json.loads(text)
            if not isinstance(data, dict):
                raise ValueError("top-level value is not an object")
            return cls.from_dict(data, catalog, logger)
        except ValueError as e:
            (logger or Logger("Inventory")).error(f"Could not load inventory: {e}")
            return None
