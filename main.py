import argparse

from slot_inventory.config import BACKPACK_CAPACITY, DEFAULT_LOG_LEVEL, ITEM_TEMPLATE_DIR, VERBOSE_LOG_LEVEL
from slot_inventory.holder import InventoryHolder
from slot_inventory.items.item_definition import ItemCatalog
from slot_inventory.utils.logger import Logger

def main():
    parser = argparse.ArgumentParser(description='Slot inventory demo')
    parser.add_argument('--capacity', '-c', type=int, default=BACKPACK_CAPACITY,
                        help=f'Backpack slots (default: {BACKPACK_CAPACITY})')
    parser.add_argument('--items', '-i', type=str, default=ITEM_TEMPLATE_DIR,
                        help='Directory of item definition JSON files')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Log every placement and removal')
    args = parser.parse_args()

    logger = Logger("Demo", VERBOSE_LOG_LEVEL if args.verbose else DEFAULT_LOG_LEVEL)
    catalog = ItemCatalog(logger=logger.bind("ItemCatalog"))
    if not catalog.load_directory(args.items):
        print(f"No item definitions found in '{args.items}'.")
        return 1

    someone = InventoryHolder(backpack_capacity=args.capacity, logger=logger.bind("Inventory"))
    backpack = someone.backpack

    sword = catalog.create_stack("sword")
    apple = catalog.create_stack("apple")

    backpack.add(sword)
    print(backpack)

    backpack.add(apple)
    print(backpack)

    carry = apple.add_quantity(10)
    if carry > 0:
        backpack.add(apple.copy(carry))
    print(backpack)

    backpack.move(apple, 3)
    print(backpack)
    print(backpack.summary())
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
