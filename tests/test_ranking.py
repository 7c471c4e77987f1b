from __future__ import annotations

from beat_the_bots.core.ranking import rank_standings, standing_key


def test_standing_key_fallback_chain() -> None:
    assert standing_key({"model_id": 3, "model_name": "A"}, 0) == "id:3"
    assert standing_key({"model_name": "A"}, 0) == "name:A"
    assert standing_key({}, 5) == "index:5"


def test_rank_by_avg_then_total() -> None:
    standings = [
        {"model_id": "a", "avg_points": 5.0, "total_points": 20},
        {"model_id": "b", "avg_points": 8.0, "total_points": 16},
        {"model_id": "c", "avg_points": 5.0, "total_points": 30},
    ]
    out = rank_standings(standings)
    assert [s["model_id"] for s in out] == ["b", "c", "a"]
    assert [s["rank"] for s in out] == [1, 2, 3]


def test_full_ties_keep_incoming_order() -> None:
    standings = [
        {"model_name": "first", "avg_points": 7.25, "total_points": 29, "rank": 2},
        {"model_name": "second", "avg_points": 7.25, "total_points": 29, "rank": 1},
    ]
    out = rank_standings(standings)
    assert [(s["model_name"], s["rank"]) for s in out] == [("first", 1), ("second", 2)]


def test_ranks_are_dense_without_identity_fields() -> None:
    standings = [{"avg_points": 1.0}, {"avg_points": 3.0}, {"avg_points": 2.0}]
    out = rank_standings(standings)
    assert [s["rank"] for s in out] == [1, 2, 3]
    assert [s["avg_points"] for s in out] == [3.0, 2.0, 1.0]


def test_duplicate_ids_still_get_distinct_ranks() -> None:
    standings = [
        {"model_id": 1, "avg_points": 2.0},
        {"model_id": 1, "avg_points": 9.0},
    ]
    out = rank_standings(standings)
    assert sorted(s["rank"] for s in out) == [1, 2]
    assert out[0]["avg_points"] == 9.0


def test_does_not_mutate_input() -> None:
    standings = [{"model_id": 1, "avg_points": 2.0, "rank": 9}]
    rank_standings(standings)
    assert standings[0]["rank"] == 9


def test_empty_standings() -> None:
    assert rank_standings([]) == []


def test_suffixed_duplicate_cannot_collide_with_real_id() -> None:
    standings = [
        {"model_id": 1, "avg_points": 3.0},
        {"model_id": "1#2", "avg_points": 2.0},
        {"model_id": 1, "avg_points": 1.0},
    ]
    out = rank_standings(standings)
    assert [(s["model_id"], s["rank"]) for s in out] == [(1, 1), ("1#2", 2), (1, 3)]
