# slot_inventory/config/config_game.py
"""
Configuration for file paths and logging.
"""
import os

# --- Directories and Files ---
# config_game.py is in slot_inventory/config/, so we go up two levels to get to root.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
DATA_DIR = os.path.join(BASE_DIR, "data")
ITEM_TEMPLATE_DIR = os.path.join(DATA_DIR, "items")

# --- Logging ---
# Matches slot_inventory.utils.logger.LogLevel (DEBUG=0 ... CRITICAL=4)
DEFAULT_LOG_LEVEL = 2  # WARNING; placement chatter is DEBUG
VERBOSE_LOG_LEVEL = 0
LOG_TIME_FORMAT = "%H:%M:%S"
