# slot_inventory/items/inventory/core.py
from typing import Iterator, List, Optional, Tuple, Union

from slot_inventory.config import DEFAULT_INVENTORY_CAPACITY, DEFAULT_INVENTORY_NAME, EMPTY_SLOT
from slot_inventory.items.errors import InventoryError
from slot_inventory.items.item_stack import ItemStack
from slot_inventory.utils.logger import Logger
from . import transfer
from .display import InventoryDisplayMixin
from .persistence import InventoryPersistenceMixin

class Inventory(InventoryDisplayMixin, InventoryPersistenceMixin):
    """
    A fixed number of slots, each empty or holding exactly one ItemStack.
    Mixins handle display strings and serialization; cross-inventory moves live in transfer.

    Every occupied slot i holds a stack whose location is (self, i). Public
    methods leave that true when they return. Expected failures (full
    inventory, bad slot, mismatched item) return False and set last_error.
    """

    def __init__(self, capacity: int = DEFAULT_INVENTORY_CAPACITY,
                 debug_name: str = DEFAULT_INVENTORY_NAME,
                 logger: Optional[Logger] = None):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"Inventory capacity must be a positive integer, got {capacity!r}.")
        self._capacity = capacity
        self._slots: List[Optional[ItemStack]] = [None] * capacity
        self.debug_name = debug_name
        self.logger = logger or Logger("Inventory")
        self.last_error: Optional[InventoryError] = None

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def slots(self) -> Tuple[Optional[ItemStack], ...]:
        return tuple(self._slots)

    def __len__(self) -> int:
        return self._capacity

    def __getitem__(self, slot: int) -> Optional[ItemStack]:
        self._check_index(slot)
        return self._slots[slot]

    def __iter__(self) -> Iterator[ItemStack]:
        for stack in self._slots:
            if stack is not None:
                yield stack

    def __contains__(self, target: object) -> bool:
        if isinstance(target, (str, ItemStack)):
            return self.contains(target)
        return False

    def stacks(self) -> Iterator[ItemStack]:
        """Occupied slots in ascending order. Each call starts from slot 0."""
        return iter(self)

    # --- Placement ---
    def add(self, stack: Optional[ItemStack], slot: int = EMPTY_SLOT,
            source_slot: int = EMPTY_SLOT) -> bool:
        """
        Adds a detached stack.

        A negative slot searches for the first slot that is empty or holds a
        non-full stack of the same item. A given slot is used as-is. Merging
        consumes the incoming stack; overflow is added again as a new stack,
        at source_slot when that slot can take it, otherwise by search.
        A merge is not undone if its overflow finds no room.
        """
        self.last_error = None
        if stack is None:
            return self._fail(InventoryError.INVALID_REFERENCE, "Cannot add a missing stack.")
        if stack.is_disposed:
            return self._fail(InventoryError.INVALID_REFERENCE, f"Cannot add disposed stack {stack}.")
        if not stack.is_detached:
            return self._fail(InventoryError.INVALID_REFERENCE,
                              f"{stack} is still at slot {stack.current_slot}; move it instead.")
        if stack.quantity <= 0:
            return self._fail(InventoryError.INVALID_REFERENCE, f"Cannot add empty stack {stack}.")

        if slot < 0:
            slot = self._first_available_slot(stack)
            if slot < 0:
                return self._fail(InventoryError.OUT_OF_CAPACITY, f"No room for {stack}.")
        elif slot >= self._capacity:
            return self._fail(InventoryError.OUT_OF_CAPACITY,
                              f"Slot {slot} is outside capacity {self._capacity}.")
        else:
            occupant = self._slots[slot]
            if occupant is not None and not occupant.is_stackable_with(stack):
                return self._fail(InventoryError.NOT_STACKABLE,
                                  f"Cannot stack {stack} onto {occupant} at {slot}.")

        return self._place_into_slot(stack, slot, source_slot)

    def move(self, stack: Optional[ItemStack], slot: int = EMPTY_SLOT) -> bool:
        """Moves a stack to a slot of this inventory. See transfer.move."""
        return transfer.move(stack, slot, self)

    @staticmethod
    def move_to(stack: Optional[ItemStack], slot: int, target: Optional['Inventory']) -> bool:
        """Moves a stack to a slot of `target`, which may be another inventory."""
        return transfer.move(stack, slot, target)

    @staticmethod
    def swap(stack_a: Optional[ItemStack], stack_b: Optional[ItemStack]) -> bool:
        """Exchanges two placed stacks. Prefer move(); it swaps when it has to."""
        return transfer.swap(stack_a, stack_b)

    # --- Removal ---
    def remove(self, slot: Union[int, str], amount: int = 1) -> int:
        """
        Removes up to `amount` from the stack at `slot` (or the first stack of an
        item id). A stack brought to zero is destroyed. Returns the amount removed.
        """
        if isinstance(slot, str):
            return self.remove_item(slot, amount)

        self.last_error = None
        self._check_index(slot)
        stack = self._slots[slot]
        if stack is None:
            return 0
        amount = min(amount, stack.quantity)
        if amount <= 0:
            return 0

        self.logger.log(f"{self.debug_name}: Removing {amount} {stack} at {slot}.")
        self._add_to_slot(slot, -amount)
        return amount

    def remove_item(self, item_id: str, amount: int = 1) -> int:
        self.last_error = None
        slot = self.find_first(item_id)
        if slot < 0:
            return 0
        return self.remove(slot, amount)

    def destroy(self, target: Union[ItemStack, int, None], dispose_stack: bool = True) -> bool:
        """
        Empties the slot holding `target` (a stack or a slot index).
        With dispose_stack=False the stack survives, detached, to be placed again.
        """
        self.last_error = None
        if isinstance(target, bool):
            return self._fail(InventoryError.INVALID_REFERENCE, f"{target!r} is not a slot or a stack.")
        if isinstance(target, int):
            self._check_index(target)
            slot = target
            stack = self._slots[slot]
            if stack is None:
                return False
        else:
            stack = target
            if stack is None:
                return self._fail(InventoryError.INVALID_REFERENCE, "Cannot destroy a missing stack.")
            slot = stack.current_slot
            if stack.inventory is not self or self._slots[slot] is not stack:
                return self._fail(InventoryError.INVALID_REFERENCE, f"{stack} is not in {self.debug_name}.")

        self.logger.log(f"{self.debug_name}: Removing all {stack} at {slot}.")
        self._slots[slot] = None
        if dispose_stack:
            stack.dispose()
        else:
            stack.detach()
        return True

    def clear(self, dispose_stacks: bool = True) -> None:
        """Empties every slot. Stacks are disposed, or detached if dispose_stacks is False."""
        self.last_error = None
        if dispose_stacks:
            self.dispose()
        else:
            for stack in self:
                stack.detach()
        self._slots = [None] * self._capacity

    def dispose(self) -> None:
        """Destroys every stack, last slot first."""
        self.last_error = None
        for slot in range(self._capacity - 1, -1, -1):
            if self._slots[slot] is not None:
                self.destroy(slot, True)

    # --- Queries ---
    def contains(self, target: Union[ItemStack, str]) -> bool:
        if isinstance(target, str):
            return self.find_first(target) >= 0
        return any(stack is target for stack in self._slots)

    def find_first(self, item_id: str) -> int:
        """Index of the first stack of item_id, or -1."""
        for i, stack in enumerate(self._slots):
            if stack is not None and stack.item_id == item_id:
                return i
        return -1

    def count_item(self, item_id: str) -> int:
        count = 0
        for stack in self:
            if stack.item_id == item_id:
                count += stack.quantity
        return count

    def count_tags(self, tag: str) -> int:
        return sum(stack.quantity for stack in self if tag in stack.tags)

    def get_empty_slots(self) -> int:
        return sum(1 for stack in self._slots if stack is None)

    # --- Atomic steps ---
    def _fail(self, error: InventoryError, message: str) -> bool:
        self.last_error = error
        self.logger.warning(f"{self.debug_name}: {message}")
        return False

    def _check_index(self, slot: int) -> None:
        # Negative indexes would silently wrap on a list
        if slot < 0 or slot >= self._capacity:
            raise IndexError(f"Slot {slot} out of range for {self.debug_name} (capacity {self._capacity}).")

    def _accepts(self, stack: ItemStack, slot: int) -> bool:
        occupant = self._slots[slot]
        return occupant is None or (occupant.is_stackable_with(stack) and not occupant.is_full)

    def _first_available_slot(self, stack: ItemStack) -> int:
        for i in range(self._capacity):
            if self._accepts(stack, i):
                return i
        return -1

    def _set_slot(self, stack: ItemStack, slot: int) -> None:
        self._slots[slot] = stack
        stack.bind_to(self, slot)

    def _place_into_slot(self, stack: ItemStack, slot: int, source_slot: int = EMPTY_SLOT) -> bool:
        """Sets an empty slot, or merges into the stack already there."""
        if self._slots[slot] is None:
            self.logger.log(f"{self.debug_name}: Placed {stack} at {slot}.")
            self._set_slot(stack, slot)
            return True

        if self._slots[slot].is_full:
            # Nothing merges into a full stack; the whole stack goes elsewhere intact
            self.logger.log(f"{self.debug_name}: {self._slots[slot]} at {slot} is full, rerouting {stack}.")
            return self._place_elsewhere(stack, source_slot)

        self.logger.log(f"{self.debug_name}: Adding {stack} at {slot}.")
        amount = stack.quantity
        stack.dispose() # Its units now belong to the occupant
        return self._add_to_slot(slot, amount, source_slot)

    def _place_elsewhere(self, stack: ItemStack, source_slot: int = EMPTY_SLOT) -> bool:
        """Adds at source_slot when it can take the stack, otherwise by search."""
        if 0 <= source_slot < self._capacity and self._accepts(stack, source_slot):
            return self.add(stack, source_slot)
        return self.add(stack)

    def _add_to_slot(self, slot: int, amount: int, source_slot: int = EMPTY_SLOT) -> bool:
        """Changes the quantity at slot; overflow becomes a new stack, an emptied stack is destroyed."""
        occupant = self._slots[slot]
        if occupant is None:
            return False

        placed = True
        carry = occupant.add_quantity(amount)
        if carry > 0:
            spill = occupant.copy(carry)
            placed = self._place_elsewhere(spill, source_slot)
            if not placed:
                self.logger.warning(f"{self.debug_name}: Dropped overflow of {carry} {occupant.name}.")
                spill.dispose()

        if occupant.quantity <= 0:
            self.destroy(occupant)
        return placed
