# tests/test_inventory_move_swap.py
import random

from tests.fixtures import InventoryTestBase
from slot_inventory.items.errors import InventoryError
from slot_inventory.items.inventory import Inventory, move, swap

class TestInventoryMove(InventoryTestBase):

    def test_add_grow_and_move_walkthrough(self):
        """sword -> slot 0, apple x12 -> slot 1, +10 apples overflows by 2, apple moves to slot 3."""
        sword = self.stack("sword")
        apple = self.stack("apple", 12)

        self.assertTrue(self.inventory.add(sword))
        self.assertEqual(sword.location, (self.inventory, 0))
        self.assertTrue(self.inventory.add(apple))
        self.assertEqual(apple.location, (self.inventory, 1))

        carry = apple.add_quantity(10)
        self.assertEqual(apple.quantity, 20)
        self.assertEqual(carry, 2)

        self.assertTrue(self.inventory.move(apple, 3))
        self.assertIsNone(self.inventory[1])
        self.assertIs(self.inventory[3], apple)
        self.assertEqual(apple.location, (self.inventory, 3))
        self.assertBackLinks([self.inventory])

    def test_move_to_current_slot_is_noop(self):
        apple = self.stack("apple", 3)
        self.inventory.add(apple, 2)
        self.assertTrue(self.inventory.move(apple, 2))
        self.assertEqual(apple.location, (self.inventory, 2))

    def test_move_onto_other_item_swaps(self):
        sword = self.stack("sword")
        apple = self.stack("apple", 3)
        self.inventory.add(sword)
        self.inventory.add(apple)
        self.assertTrue(self.inventory.move(apple, 0))
        self.assertIs(self.inventory[0], apple)
        self.assertIs(self.inventory[1], sword)
        self.assertBackLinks([self.inventory])

    def test_move_outside_capacity_fails_without_mutation(self):
        apple = self.stack("apple", 3)
        self.inventory.add(apple, 1)
        self.assertFalse(self.inventory.move(apple, 4))
        self.assertEqual(self.inventory.last_error, InventoryError.OUT_OF_CAPACITY)
        self.assertEqual(apple.location, (self.inventory, 1))

    def test_move_with_missing_references(self):
        apple = self.stack("apple", 3)
        self.inventory.add(apple)
        self.assertFalse(Inventory.move_to(apple, 0, None))
        self.assertFalse(self.inventory.move(None, 0))
        self.assertEqual(self.inventory.last_error, InventoryError.INVALID_REFERENCE)
        self.assertIs(self.inventory[0], apple)

    def test_move_detached_stack_places_it(self):
        apple = self.stack("apple", 3)
        self.assertTrue(self.inventory.move(apple, 2))
        self.assertEqual(apple.location, (self.inventory, 2))

    def test_move_detached_onto_other_item_fails(self):
        self.inventory.add(self.stack("sword"))
        apple = self.stack("apple", 3)
        self.assertFalse(self.inventory.move(apple, 0))
        self.assertEqual(self.inventory.last_error, InventoryError.NOT_STACKABLE)
        self.assertTrue(apple.is_detached)

    def test_move_between_inventories(self):
        equipment = self.make_inventory(4, "equips")
        apple = self.stack("apple", 3)
        self.inventory.add(apple, 1)

        self.assertTrue(Inventory.move_to(apple, 2, equipment))
        self.assertIsNone(self.inventory[1])
        self.assertIs(equipment[2], apple)
        self.assertEqual(apple.location, (equipment, 2))
        self.assertBackLinks([self.inventory, equipment])

    def test_move_with_search_slot(self):
        equipment = self.make_inventory(4, "equips")
        equipment.add(self.stack("sword"))
        apple = self.stack("apple", 3)
        self.inventory.add(apple)

        self.assertTrue(move(apple, -1, equipment))
        self.assertEqual(apple.location, (equipment, 1))

    def test_merge_move_returns_carry_to_vacated_slot(self):
        self.inventory.add(self.stack("apple", 15), 0)
        moving = self.stack("apple", 10)
        self.inventory.add(moving, 2)

        self.assertTrue(self.inventory.move(moving, 0))
        self.assertSlotQuantities(self.inventory, [("apple", 20), None, ("apple", 5), None])
        self.assertTrue(moving.is_disposed)
        self.assertBackLinks([self.inventory])

    def test_merge_move_across_inventories(self):
        equipment = self.make_inventory(2, "equips")
        equipment.add(self.stack("apple", 18))
        moving = self.stack("apple", 5)
        self.inventory.add(moving)

        self.assertTrue(Inventory.move_to(moving, 0, equipment))
        self.assertSlotQuantities(equipment, [("apple", 20), ("apple", 3)])
        self.assertEqual(self.inventory.get_empty_slots(), 4)
        self.assertBackLinks([self.inventory, equipment])

    def test_failed_search_move_puts_stack_back(self):
        equipment = self.make_inventory(1, "equips")
        equipment.add(self.stack("sword"))
        apple = self.stack("apple", 3)
        self.inventory.add(apple, 2)

        self.assertFalse(Inventory.move_to(apple, -1, equipment))
        self.assertEqual(equipment.last_error, InventoryError.OUT_OF_CAPACITY)
        self.assertEqual(apple.location, (self.inventory, 2))
        self.assertFalse(apple.is_disposed)
        self.assertBackLinks([self.inventory, equipment])

    def test_move_onto_full_stack_without_room_returns_stack(self):
        equipment = self.make_inventory(1, "equips")
        equipment.add(self.stack("apple", 20))
        apple = self.stack("apple", 5)
        self.inventory.add(apple, 0)

        self.assertFalse(Inventory.move_to(apple, 0, equipment))
        self.assertEqual(equipment.last_error, InventoryError.OUT_OF_CAPACITY)
        self.assertEqual(apple.location, (self.inventory, 0))
        self.assertFalse(apple.is_disposed)
        self.assertEqual(self.inventory.count_item("apple") + equipment.count_item("apple"), 25)
        self.assertBackLinks([self.inventory, equipment])

    def test_move_onto_full_stack_in_same_inventory_stays_put(self):
        full = self.stack("apple", 20)
        apple = self.stack("apple", 5)
        self.inventory.add(full, 0)
        self.inventory.add(apple, 1)
        self.inventory.add(self.stack("sword"), 2)
        self.inventory.add(self.stack("sword"), 3)

        self.assertTrue(self.inventory.move(apple, 0))
        self.assertEqual(apple.location, (self.inventory, 1))
        self.assertFalse(apple.is_disposed)
        self.assertSlotQuantities(self.inventory, [("apple", 20), ("apple", 5), ("sword", 1), ("sword", 1)])
        self.assertBackLinks([self.inventory])

class TestInventorySwap(InventoryTestBase):

    def test_swap_within_inventory(self):
        sword = self.stack("sword")
        apple = self.stack("apple", 4)
        self.inventory.add(sword, 0)
        self.inventory.add(apple, 3)

        self.assertTrue(Inventory.swap(sword, apple))
        self.assertEqual(sword.location, (self.inventory, 3))
        self.assertEqual(apple.location, (self.inventory, 0))
        self.assertBackLinks([self.inventory])

    def test_swap_across_inventories(self):
        equipment = self.make_inventory(4, "equips")
        sword = self.stack("sword")
        arrows = self.stack("arrow", 40)
        self.inventory.add(sword, 0)
        equipment.add(arrows, 3)

        self.assertTrue(swap(sword, arrows))
        self.assertIs(equipment[3], sword)
        self.assertIs(self.inventory[0], arrows)
        self.assertEqual(sword.location, (equipment, 3))
        self.assertEqual(arrows.location, (self.inventory, 0))
        self.assertBackLinks([self.inventory, equipment])

    def test_swap_needs_placed_stacks(self):
        sword = self.stack("sword")
        self.inventory.add(sword)
        loose = self.stack("apple")
        self.assertFalse(swap(sword, loose))
        self.assertFalse(swap(sword, None))
        self.assertEqual(self.inventory.last_error, InventoryError.INVALID_REFERENCE)
        self.assertIs(self.inventory[0], sword)

    def test_swap_with_itself(self):
        sword = self.stack("sword")
        self.inventory.add(sword, 1)
        self.assertTrue(swap(sword, sword))
        self.assertEqual(sword.location, (self.inventory, 1))

class TestBackLinkInvariant(InventoryTestBase):

    def test_random_operations_keep_back_links(self):
        rng = random.Random(1234)
        backpack = self.make_inventory(6, "backpack")
        equipment = self.make_inventory(3, "equips")
        inventories = [backpack, equipment]
        created = []

        for _ in range(400):
            action = rng.choice(["add", "add_at", "move", "swap", "remove", "destroy", "split"])
            placed = [stack for inv in inventories for stack in inv]
            target = rng.choice(inventories)

            if action in ("add", "add_at"):
                item_id = rng.choice(["sword", "apple", "arrow", "potion"])
                definition = self.catalog.get(item_id)
                assert definition is not None
                stack = self.stack(item_id, rng.randint(1, definition.stack_size))
                created.append(stack)
                if action == "add":
                    target.add(stack)
                else:
                    target.add(stack, rng.randint(-1, target.capacity))
            elif action == "move" and placed:
                Inventory.move_to(rng.choice(placed), rng.randint(-1, target.capacity), target)
            elif action == "swap" and len(placed) >= 2:
                a, b = rng.sample(placed, 2)
                swap(a, b)
            elif action == "remove" and placed:
                stack = rng.choice(placed)
                owner = stack.inventory
                assert owner is not None
                owner.remove(stack.current_slot, rng.randint(1, stack.quantity))
            elif action == "destroy" and placed:
                stack = rng.choice(placed)
                owner = stack.inventory
                assert owner is not None
                owner.destroy(stack, dispose_stack=rng.random() < 0.5)
            elif action == "split" and placed:
                stack = rng.choice(placed)
                rest = stack.split_half()
                if rest:
                    created.append(rest)
                    target.add(rest)

            self.assertBackLinks(inventories)

            # Reverse direction: anything claiming a slot really is in it
            occupants = [stack for inv in inventories for stack in inv]
            self.assertEqual(len(occupants), len({id(stack) for stack in occupants}))
            for stack in created:
                if not stack.is_detached:
                    owner, slot = stack.location
                    assert owner is not None
                    self.assertIs(owner[slot], stack)
