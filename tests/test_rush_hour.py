"""Rush-hour multiplier tests."""

from tovo_delivery.services.rush_hour import is_rush_hour, rush_hour_multiplier


def test_lunch_and_dinner_windows_are_half_open() -> None:
    """Window start hours are rush hour, window end hours are not."""
    assert rush_hour_multiplier(11) == 1.0
    assert rush_hour_multiplier(12) == 1.5
    assert rush_hour_multiplier(13) == 1.5
    assert rush_hour_multiplier(14) == 1.0
    assert rush_hour_multiplier(18) == 1.0
    assert rush_hour_multiplier(19) == 1.5
    assert rush_hour_multiplier(20) == 1.5
    assert rush_hour_multiplier(21) == 1.0


def test_every_hour_outside_windows_has_no_multiplier() -> None:
    rush_hours = {12, 13, 19, 20}

    for hour in range(24):
        assert is_rush_hour(hour) is (hour in rush_hours)
        if hour not in rush_hours:
            assert rush_hour_multiplier(hour) == 1.0
