from chaosmap.utils.caching import cache_size, clear_prefix, memoize

CALLS = []


@memoize("tests.square", maxsize=2)
def _square(value: int) -> int:
    CALLS.append(value)
    return value * value


def test_memoize_reuses_results_and_evicts_oldest():
    clear_prefix("tests.square")
    CALLS.clear()

    assert _square(2) == 4
    assert _square(2) == 4
    assert CALLS == [2]

    _square(3)
    _square(4)
    assert cache_size("tests.square") == 2

    _square(2)
    assert CALLS == [2, 3, 4, 2]

    clear_prefix("tests.square")
    assert cache_size("tests.square") == 0
