# slot_inventory/items/inventory/display.py
from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    from slot_inventory.items.inventory.core import Inventory

class InventoryDisplayMixin:
    """Mixin for generating text representations of the inventory."""

    def list_items(self) -> str:
        """
        One bracketed line per slot, empty slots included:
            backpack:
            [[1 Sword] (guid)]
            []
        """
        # Cast self to Inventory to satisfy static analysis
        inventory = cast('Inventory', self)

        lines = [f"{inventory.debug_name}:"]
        for stack in inventory.slots:
            lines.append(f"[{stack if stack else ''}]")
        return "\n".join(lines) + "\n"

    def summary(self) -> str:
        inventory = cast('Inventory', self)
        used_slots = inventory.capacity - inventory.get_empty_slots()
        return f"{inventory.debug_name}: {used_slots}/{inventory.capacity} slots"

    def __str__(self) -> str:
        return self.list_items()
