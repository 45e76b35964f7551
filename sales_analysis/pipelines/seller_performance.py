import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from sales_analysis import data_handler, settings, utils
from sales_analysis.analysis import REQUIRED_DATASETS, analyze_sales_data
from sales_analysis.formatter import reports_to_frame
from sales_analysis.options import AnalysisOptions
from sales_analysis.pipeline import DataPipeline
from sales_analysis.schemas import SellerReport

logger = logging.getLogger(__name__)


class SellerPerformancePipeline(DataPipeline):
    def __init__(
        self,
        input_path: Optional[Path] = None,
        options: Optional[AnalysisOptions | Mapping[str, Any]] = None,
        test_mode: bool = False,
    ):
        super().__init__("seller", test_mode=test_mode)
        self.filename_base = settings.REPORT_FILENAME_BASE
        # When no explicit file is given, the newest dated dataset in INPUT_DIR is used
        self.input_path = input_path
        self.options = options

    def _locate_input(self) -> Optional[Path]:
        if self.input_path is not None:
            return self.input_path

        found_info = utils.find_latest_report(settings.INPUT_DIR, settings.DATASET_FILENAME_PREFIX)
        if not found_info:
            logger.warning(
                f"  > ⚠️  No '{settings.DATASET_FILENAME_PREFIX}YYYY-MM-DD.json' file in {settings.INPUT_DIR}."
            )
            return None

        path, file_date = found_info
        logger.info(f"  > Found: {path.name} (File Date: {file_date})")
        self.status_summary["dataset_date"] = file_date.isoformat()
        return path

    def extract(self) -> Optional[dict[str, Any]]:
        logger.info("--- Loading Sales Dataset ---")

        path = self._locate_input()
        if path is None:
            return None

        data = data_handler.load_dataset(path)
        if data is None:
            return None

        self.status_summary["source"] = path.name
        for name in REQUIRED_DATASETS:
            value = data.get(name)
            self.status_summary[name] = len(value) if isinstance(value, list) else None
        return data

    def transform(self, raw_data: dict[str, Any]) -> list[SellerReport]:
        reports = analyze_sales_data(raw_data, self.options)

        logger.info("\n--- Seller Performance Report ---")
        logger.info(reports_to_frame(reports).to_string(index=False))

        self.status_summary["sellers_reported"] = len(reports)
        self.status_summary["total_bonus"] = round(sum(r.bonus for r in reports), 2)
        return reports
