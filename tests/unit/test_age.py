from datetime import date, timedelta

import pytest

from doc_extractor.processor.age import calculate_age


class TestCalculateAge:
    @pytest.mark.parametrize(
        ("reference", "expected"),
        [
            (date(2024, 3, 14), 23),
            (date(2024, 3, 15), 24),
            (date(2024, 3, 16), 24),
        ],
    )
    def test_birthday_boundary(self, reference: date, expected: int) -> None:
        assert calculate_age(date(2000, 3, 15), reference) == expected

    def test_born_today_is_zero(self) -> None:
        assert calculate_age(date(2024, 1, 2), date(2024, 1, 2)) == 0

    def test_day_before_first_birthday_is_zero(self) -> None:
        assert calculate_age(date(2023, 1, 3), date(2024, 1, 2)) == 0

    def test_dob_one_day_later_across_year_boundary_decreases_by_one(self) -> None:
        reference = date(2024, 12, 31)
        dob = date(1990, 12, 31)

        assert calculate_age(dob, reference) == 34
        assert calculate_age(dob + timedelta(days=1), reference) == 33

    def test_leap_day_birthday_in_non_leap_year(self) -> None:
        dob = date(2000, 2, 29)

        assert calculate_age(dob, date(2023, 2, 28)) == 22
        assert calculate_age(dob, date(2023, 3, 1)) == 23

    def test_leap_day_birthday_in_leap_year(self) -> None:
        assert calculate_age(date(2000, 2, 29), date(2024, 2, 29)) == 24

    def test_end_of_month_comparison(self) -> None:
        assert calculate_age(date(1994, 1, 1), date(2024, 1, 2)) == 30
        assert calculate_age(date(1994, 1, 3), date(2024, 1, 2)) == 29

    def test_past_dates_are_never_negative(self) -> None:
        reference = date(2024, 6, 15)
        for days_back in (1, 30, 180, 364, 365, 366, 10_000):
            assert calculate_age(reference - timedelta(days=days_back), reference) >= 0
