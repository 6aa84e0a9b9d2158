import numpy as np
import pytest

from prngcommon import sfmt19937, tinymt32
from prngcommon.as183 import AS183State
from prngcommon.xorshift64star import Xorshift64StarState
from pyprng import (
    Algorithm,
    GeneratorState,
    InvalidBound,
    UnknownAlgorithm,
    initial_state,
    resolve,
    seed,
    uniform,
    uniform_array,
)

ALGORITHMS = list(Algorithm)


def _draw(state: GeneratorState, count: int, n: int | None = None) -> list:
    values = []
    for _ in range(count):
        value, state = state.uniform(n)
        values.append(value)
    return values


def test_default_algorithm_is_as183() -> None:
    state = initial_state()
    assert state.algorithm is Algorithm.AS183
    assert state.state == AS183State(3172, 9814, 20125)


def test_as183_first_draw_through_public_api() -> None:
    value, state = uniform(initial_state())

    assert value == pytest.approx(27839 / 30269 + 21123 / 30307 + 25074 / 30323 - 2)
    assert state.state == AS183State(27839, 21123, 25074)
    assert state.algorithm is Algorithm.AS183


def test_sfmt_first_draw_through_public_api() -> None:
    value, state = uniform(initial_state("sfmt"))

    assert value == (1235 + 0.5) / 2**32
    assert state.state.index == 1


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_seeding_is_deterministic(algorithm) -> None:
    first = seed(12, 345, 6789, algorithm=algorithm)
    second = seed(12, 345, 6789, algorithm=algorithm)

    assert first == second
    assert _draw(first, 30) == _draw(second, 30)
    assert _draw(first, 30, n=100) == _draw(second, 30, n=100)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_sequence_restarts_from_initial_state(algorithm) -> None:
    assert _draw(initial_state(algorithm), 20) == _draw(initial_state(algorithm), 20)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_float_draws_are_in_open_unit_interval(algorithm) -> None:
    state = seed(algorithm, 3, 1, 4)
    for value in _draw(state, 200):
        assert isinstance(value, float)
        assert 0.0 < value < 1.0


@pytest.mark.parametrize("algorithm", ALGORITHMS)
@pytest.mark.parametrize("n", [1, 2, 6, 2**40])
def test_integer_draws_are_in_range(algorithm, n) -> None:
    for value in _draw(seed(algorithm, 2, 7, 1), 100, n=n):
        assert isinstance(value, int)
        assert 1 <= value <= n


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_stale_state_stays_valid(algorithm) -> None:
    state = initial_state(algorithm)
    value, advanced = uniform(state)

    assert uniform(state) == (value, advanced)
    assert advanced != state


@pytest.mark.parametrize("bound", [0, -1, 1.5, "3", True])
def test_invalid_bounds_are_rejected(bound) -> None:
    state = initial_state()
    with pytest.raises(InvalidBound):
        uniform(bound, state)


def test_invalid_bound_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        initial_state().uniform(0)


def test_numpy_integers_are_accepted_as_bounds() -> None:
    value, _ = uniform(np.int64(6), initial_state())
    assert 1 <= value <= 6


def test_unknown_algorithm() -> None:
    with pytest.raises(UnknownAlgorithm):
        initial_state("nonexistent")
    with pytest.raises(UnknownAlgorithm):
        seed("nonexistent", 1, 2, 3)


def test_seed_call_forms_agree() -> None:
    assert seed(1, 2, 3) == seed((1, 2, 3)) == seed(Algorithm.AS183, 1, 2, 3)
    assert seed(1, 2, 3).state == AS183State(2, 3, 4)
    assert seed("sfmt", 1, 2, 3) == seed(1, 2, 3, algorithm=Algorithm.SFMT19937)


def test_seed_rejects_bad_arguments() -> None:
    with pytest.raises(TypeError):
        seed(1, 2)
    with pytest.raises(TypeError):
        seed("as183", 1, 2, 3, algorithm="as183")
    with pytest.raises(TypeError):
        seed(1, 2, "3")
    with pytest.raises(TypeError):
        seed(1, 2, 3, 4)


def test_state_type_must_match_handle() -> None:
    with pytest.raises(TypeError):
        GeneratorState(resolve(Algorithm.AS183), Xorshift64StarState(1))


def test_uniform_rejects_bad_arguments() -> None:
    with pytest.raises(TypeError):
        uniform()
    with pytest.raises(TypeError):
        uniform(AS183State(1, 2, 3))


def test_seeded_states_are_not_degenerate() -> None:
    for values in [(0, 0, 0), (-1, -1, -1), (2**64, 2**32, 2**21)]:
        assert seed(*values, algorithm="xorshift64star").state.word != 0
        s = seed(*values, algorithm="xorshift128plus").state
        assert (s.s0, s.s1) != (0, 0)
        assert any(seed(*values, algorithm="xorshift1024star").state.words)
        t = seed(*values, algorithm="tinymt32").state
        assert t.status not in ((0, 0, 0, 0), (0x80000000, 0, 0, 0))
        words = [int(w) for w in seed(*values, algorithm="sfmt19937").state.words]
        assert sfmt19937.period_certification(words) == words


def test_tinymt_and_sfmt_states_are_engine_types() -> None:
    assert isinstance(initial_state("tinymt").state, tinymt32.TinyMTState)
    assert isinstance(initial_state("sfmt").state, sfmt19937.SFMTState)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_uniform_array_matches_sequential_draws(algorithm) -> None:
    state = seed(algorithm, 5, 6, 7)

    values, after = uniform_array(state, 25)

    assert values.shape == (25,)
    assert values.dtype == np.float64
    assert values.tolist() == _draw(state, 25)
    assert after == uniform_array(state, 25)[1]


def test_uniform_array_integers() -> None:
    state = seed(5, 6, 7)

    values, _ = uniform_array(state, 40, n=6)

    assert values.dtype == np.int64
    assert values.tolist() == _draw(state, 40, n=6)
    assert np.all((values >= 1) & (values <= 6))


def test_uniform_array_with_huge_bound_uses_objects() -> None:
    values, _ = uniform_array(seed("exs64", 1, 2, 3), 5, n=2**70)
    assert values.dtype == object
    assert all(1 <= v <= 2**70 for v in values)


def test_uniform_array_edge_cases() -> None:
    state = initial_state()
    values, after = uniform_array(state, 0)
    assert values.shape == (0,)
    assert after is state
    with pytest.raises(ValueError):
        uniform_array(state, -1)
    with pytest.raises(InvalidBound):
        uniform_array(state, 3, n=0)
