import json
import logging
from pathlib import Path
from typing import Any, Optional

import requests

from . import settings
from . import utils
from .formatter import reports_to_frame
from .schemas import SellerReport

logger = logging.getLogger(__name__)


def load_dataset(file_path: Path) -> Optional[dict[str, Any]]:
    """Reads a sales dataset (sellers, products, purchase_records) from a JSON file."""
    data = utils.load_json(file_path)
    if data is None:
        return None
    if not isinstance(data, dict):
        logger.error(f"❌ {file_path.name} does not contain a JSON object.")
        return None

    counts = ", ".join(f"{key}: {len(value)}" for key, value in data.items() if isinstance(value, list))
    logger.info(f"✅ Loaded {file_path.name} ({counts}).")
    return data


def save_outputs(validated_data: list[SellerReport], filename_base: str) -> list[Path]:
    """Saves the final report to CSV and conditionally to JSON, with dated filenames."""
    settings.OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    date_suffix = utils.get_date_suffix_for_filename()

    csv_path = settings.OUTPUT_DIR / f"{filename_base}_{date_suffix}.csv"
    json_path = settings.OUTPUT_DIR / f"{filename_base}_{date_suffix}.json"

    reports_to_frame(validated_data).to_csv(csv_path, index=False)
    logger.info(f"✅ Seller report saved to: {csv_path}")
    written = [csv_path]

    if settings.SAVE_JSON_OUTPUT:
        with open(json_path, "w", encoding="utf-8") as f:
            json_data = [item.model_dump(mode="json") for item in validated_data]
            json.dump(json_data, f, indent=2, ensure_ascii=False)
        logger.info(f"✅ JSON output saved to: {json_path}")
        written.append(json_path)
    else:
        logger.info("INFO: Skipping JSON file save as per configuration.")

    return written


def post_to_webhook(
    validated_data: list[SellerReport],
    metadata: dict[str, Any],
    report_type: str,
) -> bool:
    """
    Posts the report AND the run metadata to the webhook.
    Returns True when the post went through.
    """
    if not settings.WEBHOOK_URL:
        logger.warning("⚠️ WEBHOOK_URL not set. Skipping webhook post.")
        return False

    logger.info(f"🚀 Posting {report_type} report to webhook: {settings.WEBHOOK_URL}")

    payload = {
        "reportType": report_type,
        "reportData": [item.model_dump(mode="json") for item in validated_data],
        "metadata": metadata,
    }

    try:
        response = requests.post(settings.WEBHOOK_URL, json=payload, timeout=15)
        response.raise_for_status()
        logger.info("✅ Report successfully posted to webhook.")
        return True
    except requests.exceptions.RequestException as e:
        logger.error(f"❌ Error posting to webhook: {e}")
        return False
