import itertools

import pytest

from ranking.engine import SearchStatus, search_stores
from ranking.models import StoreResult
from ranking.pipeline import (
    ResultFilters,
    SortMode,
    apply_view,
    complete_first,
    initial_order,
)
from ranking.policy import RankingPolicy, default_ranking_policy
from ranking.scoring import (
    base_score,
    boosted_score,
    distance_score,
    estimated_delivery,
    price_score,
    rating_score,
)
from search.models import MedicineAvailability
from stores.models import Store


def ids(results):
    return [r.store.id for r in results]


def make_result(store_id, *, distance=1.0, rating=4.0, price=100.0, score=50.0, missing=(), available=1):
    """
    Hand-built StoreResult for pipeline tests that should not depend on scoring.
    """
    return StoreResult(
        store=Store.new(store_id, f"Store {store_id}", distance, rating),
        available_medicines=tuple(
            MedicineAvailability(f"term{i}", f"Medicine {i}", 10.0, "General", 5) for i in range(available)
        ),
        missing_medicines=tuple(missing),
        total_price=price,
        base_score=score,
        priority_score=score,
        estimated_delivery="30-45 mins",
    )


# -------------------------
# Scoring
# -------------------------

def test_component_scores_clamp_at_zero():
    policy = default_ranking_policy()

    assert distance_score(0, policy) == pytest.approx(100)
    assert distance_score(10, policy) == 0
    assert distance_score(25, policy) == 0
    assert price_score(500, policy) == 0
    assert price_score(1200, policy) == 0
    assert price_score(0, policy) == pytest.approx(100)
    assert rating_score(5, policy) == pytest.approx(100)


def test_base_score_weights():
    # 0.40*90 + 0.35*80 + 0.25*66.6
    assert base_score(4.5, 2.0, 167) == pytest.approx(80.65)


def test_availability_boost_bounds():
    base = 61.15
    assert boosted_score(base, 1.0) == pytest.approx(3 * base)
    assert boosted_score(base, 1e-9) == pytest.approx(base)


def test_priority_score_is_not_clamped(store_b):
    outcome = search_stores("Paracetamol", [Store.new("Z", "Zero", 0.0, 5.0, store_b.medicines)])
    # base 0.4*100 + 0.35*100 + 0.25*83 = 95.75, tripled
    assert outcome.results[0].priority_score == pytest.approx(287.25)
    assert outcome.results[0].priority_score > 100


@pytest.mark.parametrize(
    "distance, label",
    [(0, "30-45 mins"), (1.99, "30-45 mins"), (2, "1-2 hours"), (4.9, "1-2 hours"), (5, "2-3 hours"), (10, "3-4 hours")],
)
def test_estimated_delivery_buckets(distance, label):
    assert estimated_delivery(distance) == label


def test_ranking_policy_validation():
    with pytest.raises(ValueError):
        RankingPolicy(distance_reference_km=0).validate()
    with pytest.raises(ValueError):
        RankingPolicy(rating_weight=-0.1).validate()
    with pytest.raises(ValueError):
        RankingPolicy(delivery_buckets=[(5.0, "b"), (2.0, "a")]).validate()


# -------------------------
# Concrete scenario: A (2 of 3), B (3 of 3), C (1 of 3)
# -------------------------

def test_scenario_priority_order(scenario_stores, scenario_query):
    outcome = search_stores(scenario_query, scenario_stores)
    assert outcome.status == SearchStatus.OK

    by_id = {r.store.id: r for r in outcome.results}
    assert (len(by_id["A"].available_medicines), len(by_id["A"].missing_medicines)) == (2, 1)
    assert (len(by_id["B"].available_medicines), len(by_id["B"].missing_medicines)) == (3, 0)
    assert (len(by_id["C"].available_medicines), len(by_id["C"].missing_medicines)) == (1, 2)
    assert by_id["A"].total_price == pytest.approx(167)
    assert by_id["B"].total_price == pytest.approx(267)
    assert by_id["C"].total_price == pytest.approx(85)

    # A out-scores B on raw priority, B still leads because it is complete
    assert by_id["A"].priority_score > by_id["B"].priority_score
    assert by_id["B"].priority_score == pytest.approx(3 * by_id["B"].base_score)

    assert ids(outcome.results) == ["B", "A", "C"]
    assert ids(outcome.view(SortMode.PRIORITY)) == ["B", "A", "C"]


@pytest.mark.parametrize(
    "mode, expected",
    [
        (SortMode.PRIORITY, ["B", "A", "C"]),
        (SortMode.NEAREST, ["B", "C", "A"]),
        (SortMode.CHEAPEST, ["B", "C", "A"]),
        (SortMode.BEST_RATED, ["B", "A", "C"]),
    ],
)
def test_scenario_every_sort_mode_puts_complete_store_first(scenario_stores, scenario_query, mode, expected):
    outcome = search_stores(scenario_query, scenario_stores)
    assert ids(outcome.view(mode)) == expected


def test_every_result_accounts_for_every_term(scenario_stores, scenario_query):
    outcome = search_stores(scenario_query, scenario_stores)
    for result in outcome.results:
        assert len(result.available_medicines) + len(result.missing_medicines) == len(outcome.query)
        assert len(result.available_medicines) > 0


# -------------------------
# Pipeline
# -------------------------

def test_complete_first_is_a_stable_partition():
    results = [
        make_result("p1", missing=("x",)),
        make_result("c1"),
        make_result("p2", missing=("x",)),
        make_result("c2"),
    ]
    assert ids(complete_first(results)) == ["c1", "c2", "p1", "p2"]


def test_sort_ties_keep_input_order():
    results = [make_result("x", distance=3), make_result("y", distance=3), make_result("z", distance=1)]
    assert ids(apply_view(results, SortMode.NEAREST)) == ["z", "x", "y"]


def test_filters_apply_before_sort():
    results = [
        make_result("near_low", distance=1.5, rating=3.9),
        make_result("near_high", distance=1.9, rating=4.6),
        make_result("far_high", distance=7.0, rating=4.8, missing=("x",)),
    ]
    view = apply_view(results, "best-rated", ResultFilters.from_options(distance="2", rating="4.5"))
    assert ids(view) == ["near_high"]

    view = apply_view(results, "best-rated", ResultFilters.from_options(distance="all", rating="all"))
    assert ids(view) == ["near_high", "near_low", "far_high"]


def test_filter_bounds_are_inclusive():
    results = [make_result("edge", distance=5.0, rating=4.5)]
    assert ids(apply_view(results, filters=ResultFilters(max_distance_km=5, min_rating=4.5))) == ["edge"]


def test_sort_invariant_holds_for_every_mode_and_permutation():
    results = [
        make_result("c_far", distance=9, rating=3.0, price=400, score=10),
        make_result("p_best", distance=0.5, rating=5.0, price=10, score=250, missing=("x",)),
        make_result("c_mid", distance=4, rating=4.0, price=200, score=90),
        make_result("p_mid", distance=2, rating=4.2, price=50, score=120, missing=("y", "z")),
    ]
    for perm in itertools.permutations(results):
        for mode in SortMode:
            view = apply_view(perm, mode)
            flags = [r.is_complete for r in view]
            # no incomplete result ever precedes a complete one
            assert flags == sorted(flags, reverse=True)


def test_pipeline_is_idempotent(scenario_stores, scenario_query):
    first = search_stores(scenario_query, scenario_stores)
    second = search_stores(scenario_query, scenario_stores)

    assert ids(first.results) == ids(second.results)
    for mode in SortMode:
        assert first.view(mode) == second.view(mode)
        assert apply_view(first.view(mode), mode) == first.view(mode)


def test_initial_order_prefers_more_available_items_before_score():
    results = [
        make_result("one_high", score=500, missing=("x", "y"), available=1),
        make_result("two_low", score=5, missing=("x",), available=2),
        make_result("full", score=1, available=3),
    ]
    assert ids(initial_order(results)) == ["full", "two_low", "one_high"]


def test_sort_mode_parse():
    assert SortMode.parse(None) == SortMode.PRIORITY
    assert SortMode.parse("Best-Rated") == SortMode.BEST_RATED
    assert SortMode.parse(SortMode.NEAREST) == SortMode.NEAREST
    with pytest.raises(ValueError):
        SortMode.parse("random")


# -------------------------
# Engine statuses
# -------------------------

def test_empty_query_is_a_status_not_an_exception(scenario_stores):
    outcome = search_stores("  , ", scenario_stores)
    assert outcome.status == SearchStatus.EMPTY_QUERY
    assert outcome.results == []
    assert outcome.message


def test_no_stores_matched_is_distinct_from_empty_query(scenario_stores):
    outcome = search_stores("Insulin", scenario_stores)
    assert outcome.status == SearchStatus.NO_STORES_MATCHED
    assert outcome.query.terms == ("Insulin",)
    assert outcome.results == []
    assert not outcome.ok


def test_engine_applies_view_when_sort_or_filter_given(scenario_stores, scenario_query):
    outcome = search_stores(
        scenario_query,
        scenario_stores,
        sort_mode="nearest",
        filters=ResultFilters(max_distance_km=2),
    )
    assert ids(outcome.results) == ["C", "A"]
