# slot_inventory/items/__init__.py
