import statistics

from hypothesis import given
from hypothesis import strategies as st

from algokit.streams import running_medians, stock_span


def test_running_medians_source_example():
    assert running_medians([12, 15, 10, 5, 8, 7, 16]) == [12, 13.5, 12, 11, 10, 9, 10]


def test_running_medians_empty():
    assert running_medians([]) == []


@given(st.lists(st.integers(min_value=-1000, max_value=1000), min_size=1))
def test_running_medians_match_statistics(values):
    medians = running_medians(values)
    assert len(medians) == len(values)
    for end, median in enumerate(medians, start=1):
        assert median == statistics.median(values[:end])


def test_stock_span_source_example():
    assert stock_span([100, 80, 70, 60, 75, 85]) == [1, 1, 1, 1, 3, 5]


@given(st.integers(min_value=1, max_value=30))
def test_rising_and_flat_prices_span_everything(n):
    assert stock_span(range(n)) == list(range(1, n + 1))
    assert stock_span([7] * n) == list(range(1, n + 1))


@given(st.lists(st.integers(min_value=0, max_value=50)))
def test_stock_span_invariants(prices):
    spans = stock_span(prices)
    assert len(spans) == len(prices)
    for day, span in enumerate(spans):
        assert 1 <= span <= day + 1
        assert all(p <= prices[day] for p in prices[day - span + 1:day + 1])
        if span <= day:
            assert prices[day - span] > prices[day]