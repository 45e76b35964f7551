import argparse
import logging
import sys
from pathlib import Path

from sales_analysis.errors import AnalysisError
from sales_analysis.logger import setup_logger
from sales_analysis.pipelines.seller_performance import SellerPerformancePipeline

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build the seller performance report.")
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Dataset JSON file. Defaults to the newest sales_data_YYYY-MM-DD.json in INPUT_DIR.",
    )
    parser.add_argument(
        "--test-mode",
        action="store_true",
        help="Save outputs but skip the webhook post.",
    )
    return parser.parse_args(argv)


def run_process(argv: list[str] | None = None) -> int:
    """Main orchestration function to run the entire reporting process."""
    args = parse_args(argv)
    setup_logger()

    pipeline = SellerPerformancePipeline(input_path=args.input, test_mode=args.test_mode)
    try:
        reports = pipeline.run()
    except AnalysisError as e:
        logger.error(f"❌ Seller report failed: {e}")
        return 1

    if reports is None:
        logger.error("❌ No dataset could be loaded. Aborting process.")
        return 1

    logger.info("\n--- Process Finished Successfully ---")
    return 0


if __name__ == "__main__":
    sys.exit(run_process())
