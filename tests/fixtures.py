# tests/fixtures.py
import unittest
import sys
import os
from typing import Iterable, List

# Get the absolute path to the project root (one level up from tests/)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

# Insert root into sys.path so we can import 'slot_inventory'
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from slot_inventory.items.inventory import Inventory
from slot_inventory.items.item_definition import ItemCatalog
from slot_inventory.items.item_stack import ItemStack
from slot_inventory.utils.logger import LogLevel, RecordingLogger

TEST_ITEM_DEFINITIONS = {
    "sword": {"name": "Sword", "tags": "weapon,equip", "description": "This is a powerful sword.",
              "stackSize": 1, "buyValue": 100},
    "apple": {"name": "Apple", "tags": "usable", "description": "Nom nom.",
              "stackSize": 20, "buyValue": 3},
    "arrow": {"name": "Arrow", "tags": "ammo,equip", "description": "Pointy.",
              "stackSize": 50, "buyValue": 1},
    "potion": {"name": "Potion", "tags": "usable,magic", "description": "Fizzy.",
               "stackSize": 5, "buyValue": 25},
}

class InventoryTestBase(unittest.TestCase):
    """Base class for inventory tests: a catalog, a recording logger, and a 4-slot inventory."""

    def setUp(self):
        """Runs before EVERY test function."""
        self.logger = RecordingLogger("Test")
        self.catalog = ItemCatalog(logger=self.logger.bind("ItemCatalog"))
        self.catalog.load_dict(TEST_ITEM_DEFINITIONS)
        self.inventory = self.make_inventory(4, "backpack")

    def make_inventory(self, capacity: int, name: str = "inventory") -> Inventory:
        return Inventory(capacity, name, self.logger.bind(name))

    def stack(self, item_id: str, quantity: int = 1) -> ItemStack:
        stack = self.catalog.create_stack(item_id, quantity)
        if stack is None:
            self.fail(f"Test catalog has no '{item_id}'.")
        return stack

    def assertBackLinks(self, inventories: Iterable[Inventory]):
        """Every occupied slot points at a stack that points back at it."""
        for inventory in inventories:
            for i, stack in enumerate(inventory.slots):
                if stack is None:
                    continue
                self.assertIs(stack.inventory, inventory, f"{stack!r} in {inventory.debug_name}[{i}] has wrong owner")
                self.assertEqual(stack.current_slot, i, f"{stack!r} in {inventory.debug_name}[{i}] has wrong slot")
                self.assertGreater(stack.quantity, 0)
                self.assertLessEqual(stack.quantity, stack.stack_size)

    def assertSlotQuantities(self, inventory: Inventory, expected: List):
        """expected is a list like [("sword", 1), None, ("apple", 12), None]."""
        actual = [(s.item_id, s.quantity) if s else None for s in inventory.slots]
        self.assertEqual(actual, expected)

    def warnings(self) -> List[str]:
        return self.logger.messages(LogLevel.WARNING)
