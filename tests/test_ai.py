from __future__ import annotations

import pytest

from nim_engine import AIPlayer, EvaluationCache, Evaluator, PreconditionError


@pytest.fixture
def ai():
    return AIPlayer()


def test_terminal_convention(ai):
    assert ai.evaluate(0, True) == -1
    assert ai.evaluate(0, False) == 1


def test_perspectives_are_negations(ai):
    for n in range(0, 51):
        assert ai.evaluate(n, True) == -ai.evaluate(n, False)


def test_four_sticks_lose_for_the_mover(ai):
    assert ai.evaluate(4, True) == -1
    # every reply from 4 hands the opponent a winning position
    for move in (1, 2, 3):
        assert ai.evaluate(4 - move, False) == -1


def test_minimax_matches_modulus_rule_exhaustively(ai):
    for n in range(0, 51):
        expected = -1 if n % 4 == 0 else 1
        assert ai.evaluate(n, True) == expected, n
        assert Evaluator.heuristic(n) == expected, n


def test_select_move_leaves_multiple_of_four(ai):
    for n in range(1, 51):
        result = ai.select_move(n)
        assert 1 <= result.move <= min(3, n)
        if n % 4 != 0:
            assert (n - result.move) % 4 == 0, n
            assert result.score == 1
        else:
            assert result.score == -1


def test_select_move_fifteen(ai):
    result = ai.select_move(15)
    assert result.move == 3
    assert result.score == 1


def test_select_move_sixteen_takes_lowest_losing_move(ai):
    result = ai.select_move(16)
    assert result.move == 1
    assert result.score == -1
    assert result.scored_moves == [(1, -1), (2, -1), (3, -1)]


def test_select_move_with_fewer_sticks_than_max_take(ai):
    result = ai.select_move(1)
    assert result.move == 1
    assert result.score == 1
    assert [m for m, _ in result.scored_moves] == [1]

    result = ai.select_move(2)
    assert result.move == 2
    assert result.scored_moves == [(1, -1), (2, 1)]
    assert ai.choose_move(3) == 3


def test_evaluate_is_idempotent_across_cache_clears(ai):
    first = ai.evaluate(23, True)
    assert ai.evaluate(23, True) == first
    ai.cache.clear()
    assert len(ai.cache) == 0
    assert ai.evaluate(23, True) == first


def test_cache_memoizes_terminal_and_recursive_results():
    cache = EvaluationCache()
    ai = AIPlayer(cache=cache)
    ai.evaluate(6, True)
    assert (0, True) in cache or (0, False) in cache
    assert cache.get(6, True) == 1
    assert len(cache) > 1


def test_cached_value_is_returned_unchanged():
    cache = EvaluationCache()
    cache.put(8, True, 1)
    ai = AIPlayer(cache=cache)
    # a seeded entry short-circuits the search
    assert ai.evaluate(8, True) == 1


@pytest.mark.parametrize("count", [-1, -10, 1.5, "3", True])
def test_evaluate_rejects_invalid_counts(ai, count):
    with pytest.raises(PreconditionError):
        ai.evaluate(count, True)


@pytest.mark.parametrize("count", [0, -3])
def test_select_move_requires_sticks(ai, count):
    with pytest.raises(PreconditionError):
        ai.select_move(count)


def test_precondition_error_is_a_value_error(ai):
    with pytest.raises(ValueError):
        ai.select_move(0)


def test_large_counts_on_a_cold_cache():
    ai = AIPlayer()
    assert ai.evaluate(2000, True) == -1
    assert ai.evaluate(2001, False) == -1

    ai = AIPlayer()
    result = ai.select_move(5003)
    assert result.move == 3
    assert result.score == 1
