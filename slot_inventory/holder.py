# slot_inventory/holder.py
from typing import Dict, Optional

from slot_inventory.config import BACKPACK_CAPACITY, BACKPACK_NAME, EQUIPMENT_CAPACITY, EQUIPMENT_NAME
from slot_inventory.items.inventory import Inventory
from slot_inventory.utils.logger import Logger

class InventoryHolder:
    """Something that carries a backpack and an equipment inventory."""

    def __init__(self, backpack_capacity: int = BACKPACK_CAPACITY,
                 equipment_capacity: int = EQUIPMENT_CAPACITY,
                 logger: Optional[Logger] = None):
        self.logger = logger or Logger("InventoryHolder")
        self.backpack = Inventory(backpack_capacity, BACKPACK_NAME, self.logger)
        self.equipment = Inventory(equipment_capacity, EQUIPMENT_NAME, self.logger)

    @property
    def inventories(self) -> Dict[str, Inventory]:
        return {BACKPACK_NAME: self.backpack, EQUIPMENT_NAME: self.equipment}

    def count_item(self, item_id: str) -> int:
        return self.backpack.count_item(item_id) + self.equipment.count_item(item_id)

    def to_dict(self):
        return {name: inventory.to_dict() for name, inventory in self.inventories.items()}
