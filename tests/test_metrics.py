import math

from chaosmap.models.listing import PropertyRecord, Status
from chaosmap.services.metrics import average_prices, format_price


def _record(no: int, status, price) -> PropertyRecord:
    return PropertyRecord(no=no, status=status, price=price, land_area=100.0)


def test_average_per_status_bucket():
    averages = average_prices(
        [
            _record(1, Status.ON_MARKET, 6000.0),
            _record(2, Status.ON_MARKET, 8000.0),
            _record(3, Status.CONTRACTED, 5000.0),
        ]
    )
    assert averages.on_market == 7000.0
    assert averages.contracted == 5000.0
    assert averages.on_market_count == 2
    assert averages.contracted_count == 1


def test_empty_bucket_is_exactly_zero():
    averages = average_prices([_record(1, Status.ON_MARKET, 6000.0)])
    assert averages.contracted == 0.0
    assert not math.isnan(averages.contracted)

    empty = average_prices([])
    assert empty.on_market == 0.0 and empty.contracted == 0.0


def test_records_without_price_or_status_are_skipped():
    averages = average_prices(
        [
            _record(1, Status.ON_MARKET, None),
            _record(2, None, 9000.0),
            _record(3, Status.ON_MARKET, 4000.0),
        ]
    )
    assert averages.on_market == 4000.0
    assert averages.on_market_count == 1


def test_format_price_rounds_with_separators():
    assert format_price(6980.4) == "6,980"
    assert format_price(12345.6) == "12,346"
    assert format_price(0.0) == "0"
