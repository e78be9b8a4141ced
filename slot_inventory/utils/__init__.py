# slot_inventory/utils/__init__.py
