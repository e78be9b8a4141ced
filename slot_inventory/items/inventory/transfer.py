# slot_inventory/items/inventory/transfer.py
"""
Move and swap between (stack, inventory, slot) coordinates.
Stateless; everything goes through the inventories' own destroy/add steps, so a
stack is always taken out of its old slot before it is placed in a new one.
"""
from typing import TYPE_CHECKING, Optional

from slot_inventory.config import EMPTY_SLOT
from slot_inventory.items.errors import InventoryError

if TYPE_CHECKING:
    from slot_inventory.items.item_stack import ItemStack
    from slot_inventory.items.inventory.core import Inventory

def move(stack: Optional['ItemStack'], slot: int, target: Optional['Inventory']) -> bool:
    """
    Moves `stack` to `slot` of `target`.

    Already there: success, nothing changes. Empty, stackable or negative
    (search) destination: the stack leaves its old slot and is added to target;
    overflow from a merge inside one inventory goes back to the vacated slot.
    Occupied by a different item: the two stacks are swapped.
    """
    if target is None:
        if stack is not None and stack.inventory is not None:
            stack.inventory.logger.warning(f"Cannot move {stack}: no target inventory.")
        return False

    target.last_error = None
    if stack is None:
        return target._fail(InventoryError.INVALID_REFERENCE, "Cannot move a missing stack.")
    if slot >= target.capacity:
        return target._fail(InventoryError.OUT_OF_CAPACITY,
                            f"Slot {slot} is outside capacity {target.capacity}.")
    if stack.inventory is target and stack.current_slot == slot:
        return True
    if stack.is_disposed:
        return target._fail(InventoryError.INVALID_REFERENCE, f"Cannot move disposed stack {stack}.")

    destination = target[slot] if slot >= 0 else None
    if destination is not None and not destination.is_stackable_with(stack):
        if stack.is_detached:
            return target._fail(InventoryError.NOT_STACKABLE,
                                f"Cannot swap detached {stack} with {destination}.")
        return swap(stack, destination)

    source, source_slot = stack.location
    if source is not None:
        source.destroy(stack, dispose_stack=False)

    anchor = source_slot if source is target else EMPTY_SLOT
    placed = target.add(stack, slot, anchor)
    if not placed and source is not None and not stack.is_disposed:
        # Nothing was placed, so the vacated slot is still free
        source.add(stack, source_slot)
        target.logger.warning(f"{target.debug_name}: Move failed, {stack} returned to "
                              f"{source.debug_name} slot {source_slot}.")
    return placed

def swap(stack_a: Optional['ItemStack'], stack_b: Optional['ItemStack']) -> bool:
    """
    Exchanges two placed stacks, which may live in different inventories.
    Both are taken out, then each is added into the other's old slot.
    A half-finished swap is logged, not rolled back.
    """
    if stack_a is None or stack_b is None or stack_a.inventory is None or stack_b.inventory is None:
        for stack in (stack_a, stack_b):
            if stack is not None and stack.inventory is not None:
                stack.inventory._fail(InventoryError.INVALID_REFERENCE,
                                      "Swap needs two stacks that are both in an inventory.")
        return False
    if stack_a is stack_b:
        return True

    from_inventory, from_slot = stack_a.location
    to_inventory, to_slot = stack_b.location

    to_inventory.destroy(stack_b, dispose_stack=False)
    from_inventory.destroy(stack_a, dispose_stack=False)
    placed_a = to_inventory.add(stack_a, to_slot)
    placed_b = from_inventory.add(stack_b, from_slot)

    if not (placed_a and placed_b):
        from_inventory.logger.warning(
            f"Partial swap: {stack_a} placed={placed_a}, {stack_b} placed={placed_b}.")
    return placed_a and placed_b
