"""Тесты пайплайна загрузки файла."""

import pytest

from core.analyzer import check_dataset_size, load_dataset
from data.errors import EmptyInputError, FileReadError, NoValidRowsError, ParseError


def _write_csv(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadDataset:

    def test_orders_file(self, tmp_path):
        path = _write_csv(
            tmp_path, "orders.csv",
            'Date,Sales,Region\n'
            '2023-01-15,"1,200",East\n'
            '2023-01-15,"1,200",East\n'
            '2023-02-01,300,North\n'
            'bad-date,500,West\n'
        )
        result = load_dataset(path)

        assert result.dataset.original_row_count == 4
        assert result.dataset.cleaned_row_count == 2
        assert result.dataset.rows[0] == {"Date": "Jan 2023", "Sales": 1200.0, "Region": "East"}
        assert not result.advisory.is_large

    def test_accepts_str_path(self, tmp_path):
        path = _write_csv(tmp_path, "names.csv", "Name\nAlice\nBob\n")
        assert load_dataset(str(path)).dataset.cleaned_row_count == 2

    def test_all_rows_filtered_out(self, tmp_path):
        """У каждой строки пуста одна из двух дат."""
        path = _write_csv(
            tmp_path, "plan.csv",
            "Start Date,End Date,Task\n"
            "2023-01-01,,Design\n"
            ",2023-02-01,Build\n"
        )
        with pytest.raises(NoValidRowsError, match="All data was filtered out"):
            load_dataset(path)

    def test_empty_file(self, tmp_path):
        path = _write_csv(tmp_path, "empty.csv", "")
        with pytest.raises(EmptyInputError):
            load_dataset(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileReadError):
            load_dataset(tmp_path / "missing.csv")

    def test_unsupported_format(self, tmp_path):
        path = _write_csv(tmp_path, "data.json", "{}")
        with pytest.raises(ParseError):
            load_dataset(path)


class TestCheckDatasetSize:

    def test_small(self):
        advisory = check_dataset_size(1024)

        assert not advisory.is_large
        assert advisory.message is None

    def test_exactly_threshold_is_not_large(self):
        assert not check_dataset_size(1024 * 1024).is_large

    def test_large(self):
        advisory = check_dataset_size(2 * 1024 * 1024)

        assert advisory.is_large
        assert advisory.size_mb == 2.0
        assert advisory.message.startswith("Dataset is large (2.00 MB)")
