# slot_inventory/items/item_definition.py
"""
Item type definitions and the catalog that holds them.
Definitions are validated once, when they are loaded, so stacks never have to
guess at the shape of their source data.
"""
import json
import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, FrozenSet, Iterable, Iterator, Optional, Union

from slot_inventory.config import BUY_PRICE_MULTIPLIER, DEFAULT_ITEM_ICON, TAG_SEPARATOR
from slot_inventory.utils.logger import Logger

if TYPE_CHECKING:
    from slot_inventory.items.item_stack import ItemStack

class ItemDefinitionError(ValueError):
    """Raised when a type definition record is malformed."""

def parse_tags(raw: Union[str, Iterable[str], None]) -> FrozenSet[str]:
    """Accepts "weapon,equip" or ["weapon", "equip"]. Blank entries are dropped."""
    if raw is None:
        return frozenset()
    if isinstance(raw, str):
        raw = raw.split(TAG_SEPARATOR)
    return frozenset(tag.strip() for tag in raw if tag and tag.strip())

def _require_int(data: Dict[str, Any], key: str, item_id: str, minimum: int) -> int:
    value = data.get(key)
    # bool is an int subclass, but "stackSize": true is a typo, not a size
    if isinstance(value, bool) or not isinstance(value, int):
        raise ItemDefinitionError(f"Item definition '{item_id}': '{key}' must be an integer, got {value!r}.")
    if value < minimum:
        raise ItemDefinitionError(f"Item definition '{item_id}': '{key}' must be >= {minimum}, got {value}.")
    return value

@dataclass(frozen=True)
class ItemDefinition:
    item_id: str
    name: str
    stack_size: int
    buy_value: int
    description: str = ""
    tags: FrozenSet[str] = field(default_factory=frozenset)
    icon: str = DEFAULT_ITEM_ICON

    @property
    def base_sell_price(self) -> int:
        return self.buy_value

    @property
    def base_buy_price(self) -> int:
        return self.buy_value * BUY_PRICE_MULTIPLIER

    @classmethod
    def from_dict(cls, data: Dict[str, Any], item_id: Optional[str] = None) -> 'ItemDefinition':
        """
        Builds a definition from a raw record:
        {id, name, tags (comma-joined string), description, stackSize, buyValue, icon?}
        `item_id` overrides the record's id (catalog files are keyed by id).
        """
        if not isinstance(data, dict):
            raise ItemDefinitionError(f"Item definition must be a mapping, got {type(data).__name__}.")

        resolved_id = item_id or data.get("id")
        if not resolved_id or not isinstance(resolved_id, str):
            raise ItemDefinitionError("Item definition is missing 'id'.")
        name = data.get("name")
        if not name or not isinstance(name, str):
            raise ItemDefinitionError(f"Item definition '{resolved_id}' is missing 'name'.")

        return cls(
            item_id=resolved_id,
            name=name,
            stack_size=_require_int(data, "stackSize", resolved_id, 1),
            buy_value=_require_int(data, "buyValue", resolved_id, 0),
            description=str(data.get("description", "")),
            tags=parse_tags(data.get("tags")),
            icon=str(data.get("icon", DEFAULT_ITEM_ICON))
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.item_id,
            "name": self.name,
            "tags": TAG_SEPARATOR.join(sorted(self.tags)),
            "description": self.description,
            "stackSize": self.stack_size,
            "buyValue": self.buy_value,
            "icon": self.icon
        }

class ItemCatalog:
    """Type-definition source: item_id -> ItemDefinition."""

    def __init__(self, definitions: Optional[Iterable[ItemDefinition]] = None,
                 logger: Optional[Logger] = None):
        self.logger = logger or Logger("ItemCatalog")
        self._definitions: Dict[str, ItemDefinition] = {}
        for definition in definitions or ():
            self.register(definition)

    def register(self, definition: ItemDefinition) -> None:
        if definition.item_id in self._definitions:
            self.logger.warning(f"Duplicate item definition '{definition.item_id}'. Replacing.")
        self._definitions[definition.item_id] = definition

    def get(self, item_id: str) -> Optional[ItemDefinition]:
        return self._definitions.get(item_id)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[ItemDefinition]:
        return iter(self._definitions.values())

    def load_dict(self, data: Dict[str, Dict[str, Any]], source: str = "<dict>") -> int:
        """Loads {item_id: record}. Bad records are skipped with a warning. Returns the number loaded."""
        loaded = 0
        for item_id, record in data.items():
            try:
                self.register(ItemDefinition.from_dict(record, item_id=item_id))
                loaded += 1
            except ItemDefinitionError as e:
                self.logger.warning(f"Skipping item definition in {source}: {e}")
        return loaded

    def load_directory(self, path: str) -> int:
        """Loads every *.json file in `path`. Returns the number of definitions loaded."""
        if not os.path.isdir(path):
            self.logger.warning(f"Item definition directory not found: {path}")
            return 0

        loaded = 0
        for filename in sorted(os.listdir(path)):
            if not filename.endswith(".json"):
                continue
            file_path = os.path.join(path, filename)
            try:
                with open(file_path, 'r', encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                self.logger.error(f"Error loading item definitions from {file_path}: {e}")
                continue
            if not isinstance(data, dict):
                self.logger.warning(f"Item definition file {filename} is not a mapping. Skipping.")
                continue
            loaded += self.load_dict(data, source=filename)
        self.logger.info(f"Loaded {loaded} item definitions from {path}.")
        return loaded

    def create_stack(self, item_id: str, quantity: int = 1) -> Optional['ItemStack']:
        """Creates a detached stack of `item_id`, or None if the id is unknown."""
        from slot_inventory.items.item_stack import ItemStack

        definition = self.get(item_id)
        if not definition:
            self.logger.warning(f"Unknown item id '{item_id}'.")
            return None
        return ItemStack(definition, quantity)
