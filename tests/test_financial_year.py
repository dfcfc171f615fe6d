import pathlib
import sys
from datetime import datetime

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from financial_year import (  # noqa: E402
    get_days_remaining_in_financial_year,
    get_financial_year_end,
    get_financial_year_label,
    get_financial_year_start,
    is_in_current_financial_year,
)


def test_year_starts_on_first_of_april():
    assert get_financial_year_start(datetime(2025, 3, 31, 23, 0)) == datetime(2024, 4, 1)
    assert get_financial_year_start(datetime(2025, 4, 1, 0, 0)) == datetime(2025, 4, 1)
    assert get_financial_year_start(datetime(2025, 12, 31)) == datetime(2025, 4, 1)


def test_year_ends_on_last_millisecond_of_march():
    assert get_financial_year_end(datetime(2025, 4, 1)) == datetime(2026, 3, 31, 23, 59, 59, 999000)
    assert get_financial_year_end(datetime(2026, 2, 14)) == datetime(2026, 3, 31, 23, 59, 59, 999000)


def test_label():
    assert get_financial_year_label(datetime(2025, 10, 17)) == "2025-26"
    assert get_financial_year_label(datetime(2026, 1, 5)) == "2025-26"
    assert get_financial_year_label(datetime(1999, 5, 1)) == "1999-00"


def test_defaults_to_today():
    today = datetime.utcnow()
    assert get_financial_year_start() <= today <= get_financial_year_end()


def test_is_in_current_financial_year():
    today = datetime(2025, 10, 17)
    assert is_in_current_financial_year(datetime(2026, 3, 31, 12), today=today)
    assert is_in_current_financial_year(datetime(2025, 4, 1), today=today)
    assert not is_in_current_financial_year(datetime(2025, 3, 31, 12), today=today)
    assert not is_in_current_financial_year(datetime(2026, 4, 1), today=today)


def test_days_remaining():
    assert get_days_remaining_in_financial_year(datetime(2026, 3, 31)) == 1
    assert get_days_remaining_in_financial_year(datetime(2025, 4, 1)) == 365
