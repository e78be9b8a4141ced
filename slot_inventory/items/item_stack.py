# slot_inventory/items/item_stack.py
import uuid
from typing import TYPE_CHECKING, Any, Dict, FrozenSet, Optional, Tuple, Union

from slot_inventory.config import EMPTY_SLOT
from slot_inventory.items.item_definition import ItemCatalog, ItemDefinition

if TYPE_CHECKING:
    from slot_inventory.items.inventory.core import Inventory

def _optional(value: Any, kind: type) -> Any:
    """value if it has the expected type (bools never count as ints), else None."""
    if isinstance(value, bool) or not isinstance(value, kind):
        return None
    return value

class ItemStack:
    """
    One stack of a single item type.

    Identity and metadata come from the ItemDefinition and never change. Quantity
    is mutable and bounded by stack_size. The location (inventory, slot) is a
    coordinate maintained by the owning Inventory; it does not own anything.
    """

    def __init__(self, definition: ItemDefinition, quantity: int = 1,
                 instance_id: Optional[str] = None,
                 base_sell_price: Optional[int] = None,
                 base_buy_price: Optional[int] = None):
        self.definition = definition
        self.instance_id = instance_id or str(uuid.uuid4())
        self.quantity = quantity

        # Prices come from the definition unless a saved record carried its own
        self.base_sell_price = definition.base_sell_price if base_sell_price is None else base_sell_price
        self.base_buy_price = definition.base_buy_price if base_buy_price is None else base_buy_price

        self._inventory: Optional['Inventory'] = None
        self._slot: int = EMPTY_SLOT
        self._disposed = False

    # --- Identity / metadata (read-only) ---
    @property
    def item_id(self) -> str:
        return self.definition.item_id

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def description(self) -> str:
        return self.definition.description

    @property
    def tags(self) -> FrozenSet[str]:
        return self.definition.tags

    @property
    def icon(self) -> str:
        return self.definition.icon

    @property
    def stack_size(self) -> int:
        return self.definition.stack_size

    # --- Location ---
    @property
    def inventory(self) -> Optional['Inventory']:
        return self._inventory

    @property
    def current_slot(self) -> int:
        return self._slot

    @property
    def location(self) -> Tuple[Optional['Inventory'], int]:
        return self._inventory, self._slot

    @property
    def is_detached(self) -> bool:
        return self._inventory is None

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def is_full(self) -> bool:
        return self.quantity >= self.stack_size

    def is_stackable_with(self, other: Union['ItemStack', str]) -> bool:
        """Stacks merge only on matching item_id; nothing else is compared."""
        other_id = other if isinstance(other, str) else other.item_id
        return self.item_id == other_id

    def add_quantity(self, delta: int) -> int:
        """
        Adds delta to the stack and returns the carry.

        Positive carry is overflow past stack_size that the caller must place
        elsewhere. If delta would take the quantity below zero, the quantity is
        left untouched and the (negative) raw sum is returned. The quantity is
        never clamped to zero here; callers check `quantity <= 0` themselves and
        destroy the stack.
        """
        new_quantity = self.quantity + delta
        if new_quantity < 0:
            return new_quantity
        self.quantity = min(self.stack_size, new_quantity)
        return new_quantity - self.quantity

    def split_by(self, amount: int) -> Optional['ItemStack']:
        """
        Keeps `amount` on this stack and returns a new detached stack holding
        the rest. Returns None unless quantity >= 2 and 0 < amount < quantity.
        """
        if self.quantity < 2 or amount <= 0 or amount >= self.quantity:
            return None
        remaining = self.quantity - amount
        self.add_quantity(-remaining)
        return self.copy(remaining)

    def split_half(self) -> Optional['ItemStack']:
        if self.quantity < 2:
            return None
        return self.split_by(self.quantity // 2)

    def copy(self, quantity: int = 0) -> 'ItemStack':
        """Returns a detached stack of the same type. quantity=0 copies the current quantity."""
        return ItemStack(self.definition, quantity if quantity != 0 else self.quantity,
                         base_sell_price=self.base_sell_price,
                         base_buy_price=self.base_buy_price)

    def bind_to(self, inventory: 'Inventory', slot: int) -> None:
        # Only Inventory calls this, while it writes the matching slot
        self._inventory = inventory
        self._slot = slot

    def detach(self) -> None:
        self._inventory = None
        self._slot = EMPTY_SLOT

    def dispose(self) -> None:
        """Releases the stack. Safe to call more than once."""
        if self._disposed:
            return
        self.detach()
        self._disposed = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.item_id,
            "name": self.name,
            "tags": sorted(self.tags),
            "description": self.description,
            "quantity": self.quantity,
            "currentSlot": self._slot,
            "baseSell": self.base_sell_price,
            "baseBuy": self.base_buy_price,
            "guid": self.instance_id
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], catalog: ItemCatalog) -> Optional['ItemStack']:
        """
        Rebuilds a detached stack from a saved record.
        Stack size always comes from the catalog; prices come from the record when present.
        Returns None for unknown ids or quantities outside 1..stack_size.
        """
        item_id = data.get("id")
        if not isinstance(item_id, str):
            return None
        definition = catalog.get(item_id)
        if not definition:
            return None

        quantity = data.get("quantity", 1)
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            return None
        if quantity <= 0 or quantity > definition.stack_size:
            return None

        return cls(definition, quantity,
                   instance_id=_optional(data.get("guid"), str),
                   base_sell_price=_optional(data.get("baseSell"), int),
                   base_buy_price=_optional(data.get("baseBuy"), int))

    def __str__(self) -> str:
        return f"[{self.quantity} {self.name}] ({self.instance_id})"

    def __repr__(self) -> str:
        return f"ItemStack({self.item_id!r}, quantity={self.quantity}, slot={self._slot})"
