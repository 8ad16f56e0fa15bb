from chaosmap.models.filters import FilterState
from chaosmap.models.listing import PropertyRecord, PropertyType, Status
from chaosmap.models.view import REGION_A, REGION_B, view_by_label
from chaosmap.services.filtering import filter_listings, passes_filters
from chaosmap.services.metrics import average_prices

AGE_VIEW = view_by_label("Building age × Price")


def _record(no: int, **overrides) -> PropertyRecord:
    base = dict(
        no=no,
        property_code=f"AZ-{no:04d}",
        status=Status.ON_MARKET,
        property_type=PropertyType.USED_HOUSE,
        land_area=150.0,
        price=7000.0,
        building_age=10,
        address=f"横浜市青葉区{REGION_A.marker}",
        transaction_mode="exclusive",
    )
    base.update(overrides)
    return PropertyRecord(**base)


def _sample() -> list:
    return [
        _record(1, property_type=PropertyType.LAND, building_age=None),
        _record(2, status=Status.CONTRACTED, address=f"横浜市青葉区{REGION_B.marker}"),
        _record(3, transaction_mode="owner-direct", land_area=100.0),
        _record(4, status=Status.CONTRACTED, transaction_mode=None, land_area=400.0),
        _record(5, address=f"横浜市青葉区{REGION_B.marker}", transaction_mode="exclusive-special", price=9000.0),
        _record(6, land_area=450.0),
    ]


def _numbers(records) -> list:
    return [record.no for record in records]


def test_default_state_keeps_in_range_records_in_order():
    result = filter_listings(_sample(), FilterState())
    assert _numbers(result) == [1, 2, 3, 4, 5]


def test_building_age_view_excludes_land():
    result = filter_listings(_sample(), FilterState(view=AGE_VIEW))
    assert 1 not in _numbers(result)
    assert all(record.property_type is not PropertyType.LAND for record in result)


def test_region_toggles_exclude_matching_addresses_only():
    no_a = filter_listings(_sample(), FilterState(show_region_a=False))
    assert _numbers(no_a) == [2, 5]
    assert all(REGION_A.marker not in record.address for record in no_a)

    no_b = filter_listings(_sample(), FilterState(show_region_b=False))
    assert _numbers(no_b) == [1, 3, 4]
    assert all(REGION_B.marker not in record.address for record in no_b)


def test_status_toggles():
    no_contracted = filter_listings(_sample(), FilterState(show_contracted=False))
    assert all(record.status is not Status.CONTRACTED for record in no_contracted)
    assert _numbers(no_contracted) == [1, 3, 5]

    no_on_market = filter_listings(_sample(), FilterState(show_on_market=False))
    assert _numbers(no_on_market) == [2, 4]


def test_hiding_on_market_zeroes_on_market_average():
    result = filter_listings(_sample(), FilterState(show_on_market=False))
    averages = average_prices(result)
    assert averages.on_market == 0.0
    assert averages.contracted == 7000.0


def test_empty_mode_selection_ignores_transaction_mode():
    records = _sample()
    rewritten = [record.model_copy(update={"transaction_mode": "something-else"}) for record in records]
    assert _numbers(filter_listings(records, FilterState())) == _numbers(filter_listings(rewritten, FilterState()))


def test_mode_selection_keeps_only_members():
    result = filter_listings(_sample(), FilterState(transaction_modes=frozenset({"exclusive"})))
    assert _numbers(result) == [1, 2]
    assert all(record.transaction_mode == "exclusive" for record in result)


def test_missing_mode_is_excluded_when_selection_active():
    state = FilterState(transaction_modes=frozenset({"exclusive", "owner-direct", "exclusive-special"}))
    assert 4 not in _numbers(filter_listings(_sample(), state))


def test_land_area_bounds_are_inclusive():
    state = FilterState(land_area_min=100.0, land_area_max=150.0)
    assert _numbers(filter_listings(_sample(), state)) == [1, 2, 3, 5]


def test_zero_land_area_range_is_empty():
    result = filter_listings(_sample(), FilterState(land_area_min=0.0, land_area_max=0.0))
    assert result == []


def test_absent_fields_never_raise():
    bare = PropertyRecord(no=99)
    assert passes_filters(bare, FilterState()) is False
    assert passes_filters(bare.model_copy(update={"land_area": 10.0}), FilterState(show_region_a=False)) is True


def test_output_is_ordered_subset_and_idempotent():
    records = _sample()
    state = FilterState(show_region_b=False, land_area_min=120.0)
    first = filter_listings(records, state)
    second = filter_listings(records, state)
    assert first == second
    positions = [records.index(record) for record in first]
    assert positions == sorted(positions)
