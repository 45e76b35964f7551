from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pandas as pd
import pytest
import requests

from sales_analysis import data_handler, settings, utils
from sales_analysis.schemas import SellerReport, TopProduct


def _report() -> SellerReport:
    return SellerReport(
        seller_id="seller_1",
        name="Ada Lovelace",
        revenue=225.0,
        profit=110.0,
        sales_count=2,
        top_products=(TopProduct(sku="SKU_003", quantity=3),),
        bonus=16.5,
    )


def test_find_latest_report_picks_newest_date(tmp_path: Path) -> None:
    for name in [
        "sales_data_2025-01-02.json",
        "sales_data_2025-03-01.json",
        "sales_data_2025-02-30.json",
        "other_2025-12-31.json",
        "sales_data_2025-04-01.csv",
    ]:
        (tmp_path / name).write_text("{}", encoding="utf-8")

    path, file_date = utils.find_latest_report(tmp_path, "sales_data_")
    assert path.name == "sales_data_2025-03-01.json"
    assert file_date == date(2025, 3, 1)


def test_find_latest_report_returns_none_for_missing_dir(tmp_path: Path) -> None:
    assert utils.find_latest_report(tmp_path / "nope", "sales_data_") is None


def test_load_dataset_reads_bom_prefixed_json(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"sellers": [{"id": "s"}]}), encoding="utf-8-sig")
    assert data_handler.load_dataset(path) == {"sellers": [{"id": "s"}]}


def test_load_dataset_rejects_non_object_and_bad_json(tmp_path: Path) -> None:
    as_list = tmp_path / "list.json"
    as_list.write_text("[1, 2]", encoding="utf-8")
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")

    assert data_handler.load_dataset(as_list) is None
    assert data_handler.load_dataset(broken) is None
    assert data_handler.load_dataset(tmp_path / "missing.json") is None


def test_save_outputs_writes_csv_and_json(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "OUTPUT_DIR", tmp_path / "out")
    monkeypatch.setattr(settings, "SAVE_JSON_OUTPUT", True)

    csv_path, json_path = data_handler.save_outputs([_report()], "seller_report")

    frame = pd.read_csv(csv_path)
    assert frame.loc[0, "seller_id"] == "seller_1"
    assert frame.loc[0, "top_products"] == "SKU_003 x3"
    payload = json.loads(json_path.read_text(encoding="utf-8"))
    assert payload[0]["top_products"] == [{"sku": "SKU_003", "quantity": 3}]
    assert payload[0]["bonus"] == 16.5


def test_save_outputs_can_skip_json(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "OUTPUT_DIR", tmp_path)
    monkeypatch.setattr(settings, "SAVE_JSON_OUTPUT", False)

    written = data_handler.save_outputs([_report()], "seller_report")
    assert [p.suffix for p in written] == [".csv"]


def test_webhook_skipped_without_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "WEBHOOK_URL", None)
    assert data_handler.post_to_webhook([_report()], {}, "seller") is False


def test_webhook_posts_payload(monkeypatch: pytest.MonkeyPatch) -> None:
    sent = {}

    class FakeResponse:
        def raise_for_status(self) -> None:
            pass

    def fake_post(url, json, timeout):
        sent.update(url=url, json=json, timeout=timeout)
        return FakeResponse()

    monkeypatch.setattr(settings, "WEBHOOK_URL", "https://example.invalid/hook")
    monkeypatch.setattr(data_handler.requests, "post", fake_post)

    assert data_handler.post_to_webhook([_report()], {"sellers": 1}, "seller") is True
    assert sent["json"]["reportType"] == "seller"
    assert sent["json"]["reportData"][0]["name"] == "Ada Lovelace"
    assert sent["json"]["metadata"] == {"sellers": 1}
    assert sent["timeout"] == 15


def test_webhook_failure_is_logged_not_raised(monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_post(*args, **kwargs):
        raise requests.exceptions.ConnectionError("down")

    monkeypatch.setattr(settings, "WEBHOOK_URL", "https://example.invalid/hook")
    monkeypatch.setattr(data_handler.requests, "post", failing_post)

    assert data_handler.post_to_webhook([_report()], {}, "seller") is False
