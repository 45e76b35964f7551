import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from sales_analysis import data_handler

logger = logging.getLogger(__name__)


class DataPipeline(ABC):
    """
    Abstract base class for report pipelines.
    Follows an Extract -> Transform -> Load (ETL) pattern.
    """

    def __init__(self, report_type: str, test_mode: bool = False):
        self.report_type = report_type
        self.test_mode = test_mode
        self.filename_base = f"{report_type}_report"
        # Run metadata sent along with the report (dataset sizes, source file, ...)
        self.status_summary: dict[str, Any] = {}

    def run(self) -> Optional[list[Any]]:
        """
        Orchestrates the pipeline execution and returns the loaded records.
        Analysis errors propagate to the caller; nothing is saved in that case.
        """
        logger.info(f"🚀 STEP: {self.report_type.upper()} REPORT")
        logger.info("-" * 30)

        # --- 1. EXTRACT ---
        raw_data = self.extract()
        if raw_data is None:
            logger.warning(f"⚠️ No data extracted for {self.report_type}. Nothing to report.")
            return None

        # --- 2. TRANSFORM ---
        validated_data = self.transform(raw_data)

        # --- 3. LOAD ---
        self.load(validated_data)

        logger.info(f"✅ {self.report_type.capitalize()} Pipeline Finished.\n")
        logger.info("=" * 60)
        return validated_data

    @abstractmethod
    def extract(self) -> Any | None:
        """
        Responsible for finding and reading the input, returning it raw.
        Should also populate self.status_summary as it goes.
        """

    @abstractmethod
    def transform(self, raw_data: Any) -> list[Any]:
        """Turns the raw input into a list of validated Pydantic models."""

    def load(self, validated_data: list[Any]):
        """
        Saves data to disk and posts to webhook.
        """
        if self.status_summary:
            logger.info("\n--- Final Status Summary ---")
            for key, value in self.status_summary.items():
                logger.info(f"{key}: {value}")

        if validated_data:
            data_handler.save_outputs(validated_data, self.filename_base)
        else:
            logger.warning("No data to save to disk.")

        if not self.test_mode:
            data_handler.post_to_webhook(
                validated_data=validated_data,
                metadata=self.status_summary,
                report_type=self.report_type,
            )
        else:
            logger.info("🧪 Test Mode: Skipping webhook post.")
