import os
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")

# --- Path Configuration ---
# Use Path objects for robust, OS-agnostic path handling.
INPUT_DIR = BASE_DIR / os.getenv("INPUT_DIR", "input")
OUTPUT_DIR = BASE_DIR / os.getenv("OUTPUT_DIR", "output")

# --- Filename Configuration ---
# Input datasets are expected as e.g. "sales_data_2025-12-19.json"
DATASET_FILENAME_PREFIX = os.getenv("DATASET_FILENAME_PREFIX", "sales_data_")
REPORT_FILENAME_BASE = os.getenv("REPORT_FILENAME_BASE", "seller_report")
SAVE_JSON_OUTPUT = os.getenv("SAVE_JSON_OUTPUT", "true").lower() in ("1", "true", "yes")

# --- Webhook ---
WEBHOOK_URL = os.getenv("WEBHOOK_URL")

# --- Shared Business Logic ---
# "skip" ignores purchase records / line items pointing at unknown sellers or
# skus, "raise" aborts the run on the first one.
UNRESOLVED_POLICY = os.getenv("UNRESOLVED_POLICY", "skip").lower()

# Legacy mode: round every line item to cents before adding it to the totals.
ROUND_INTERMEDIATE = os.getenv("ROUND_INTERMEDIATE", "false").lower() in ("1", "true", "yes")

# How many products end up in each seller's top list.
TOP_PRODUCTS_LIMIT = int(os.getenv("TOP_PRODUCTS_LIMIT", "10"))

# Bonus tiers, as a fraction of the seller's profit.
BONUS_RATE_FIRST = 0.15
BONUS_RATE_PODIUM = 0.10
BONUS_RATE_DEFAULT = 0.05

# --- Logging ---
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")
LOG_FILENAME = os.getenv("LOG_FILENAME", "seller_report.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
