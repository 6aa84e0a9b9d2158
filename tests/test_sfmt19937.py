import numpy as np
import pytest

from prngcommon import sfmt19937
from prngcommon.bits import MASK32, parity32
from prngcommon.sfmt19937 import N32, PARITY, SFMTState


def _certified(words) -> bool:
    inner = 0
    for k in range(4):
        inner ^= int(words[k]) & PARITY[k]
    return parity32(inner) == 1


def test_parameters() -> None:
    assert N32 == 624
    assert sfmt19937.IDSTR.startswith("SFMT-19937:122-18-1-11-1")


def test_init_gen_rand_expands_the_seed() -> None:
    state = sfmt19937.init_gen_rand(1234)

    assert state.index == N32
    assert state.words.shape == (N32,)
    assert state.words.dtype == np.uint32
    # certification flips the lowest bit of 1234
    assert [int(v) for v in state.words[:4]] == [1235, 3159640283, 4062961311, 3954462607]
    assert int(state.words[1]) == (1812433253 * 1234 + 1) & MASK32
    assert _certified(state.words)


def test_reference_outputs_after_init_gen_rand() -> None:
    state = sfmt19937.init_gen_rand(1234)

    first, state = sfmt19937.gen_rand32(state)
    second, state = sfmt19937.gen_rand32(state)

    assert (first, second) == (3440181298, 1564997079)


def test_initial_state_hands_out_seeded_words_first() -> None:
    state = sfmt19937.initial_state()

    assert state.index == 0
    assert state == SFMTState(sfmt19937.init_gen_rand(1234).words, 0)

    value, state = sfmt19937.uniform_float(state)
    assert value == (1235 + 0.5) / 2**32

    for _ in range(N32 - 1):
        _, state = sfmt19937.gen_rand32(state)
    word, _ = sfmt19937.gen_rand32(state)
    assert word == 3440181298


def test_state_words_are_read_only() -> None:
    state = sfmt19937.initial_state()
    with pytest.raises(ValueError):
        state.words[0] = 1


def test_period_certification_fixes_forced_degenerate_state() -> None:
    words = sfmt19937.period_certification([0] * N32)

    assert words[0] == 1
    assert words[1:] == [0] * (N32 - 1)
    assert _certified(words)


def test_period_certification_keeps_certified_state() -> None:
    words = [1] + [0] * (N32 - 1)
    assert sfmt19937.period_certification(words) == words


def test_exhausted_buffer_is_refilled() -> None:
    state = sfmt19937.init_gen_rand(1234)
    refilled = sfmt19937.gen_rand_all(state.words)

    word, new = sfmt19937.gen_rand32(state)

    assert new.index == 1
    assert word == int(refilled[0])
    assert np.array_equal(new.words, refilled)


def test_draws_walk_the_buffer_without_refilling() -> None:
    state = sfmt19937.initial_state()
    buffer = state.words

    _, state = sfmt19937.gen_rand32(state)
    word, new = sfmt19937.gen_rand32(state)

    assert word == int(buffer[1])
    assert new.words is buffer
    assert new.index == 2


def test_recursion_combines_four_lanes() -> None:
    w = sfmt19937.initial_state().words
    expected = sfmt19937.do_recursion(w[0:4], w[488:492], w[616:620], w[620:624])

    refilled = sfmt19937.gen_rand_all(w)

    assert np.array_equal(refilled[0:4], expected)


def test_refill_leaves_the_input_untouched() -> None:
    words = sfmt19937.initial_state().words
    before = words.copy()

    sfmt19937.gen_rand_all(words)

    assert np.array_equal(words, before)


def test_seed_uses_the_key_list_mode() -> None:
    state = sfmt19937.seed((1, 2, 3))

    assert state.index == 0
    assert np.array_equal(state.words, sfmt19937.init_by_array([2, 3, 4]).words)
    assert [int(v) for v in state.words[:2]] == [2122763060, 2124673009]
    assert _certified(state.words)


def test_negative_seed_values_use_truncated_remainder() -> None:
    state = sfmt19937.seed((-5, 0, 0))

    # (-5 + 1) keeps its sign before being taken as a 32-bit word
    assert np.array_equal(state.words, sfmt19937.init_by_array([(-4) & MASK32, 1, 1]).words)
    assert int(state.words[0]) == 2813870077
    assert sfmt19937.seed((-4294967295, 0, 0)) == sfmt19937.seed((1, 0, 0))


def test_uniform_values_are_in_range() -> None:
    state = sfmt19937.seed((7, 8, 9))
    for _ in range(100):
        value, state = sfmt19937.uniform_float(state)
        assert 0.0 < value < 1.0
        k, state = sfmt19937.uniform_int(6, state)
        assert 1 <= k <= 6
