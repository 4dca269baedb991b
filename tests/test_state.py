import random

from raidseeker.state import State


def test_new_state_has_unset_ivs():
    state = State(seed=5, advances=3)
    assert state.ivs == [255] * 6
    assert (state.seed, state.advances) == (5, 3)


def test_ivs_are_not_shared_between_states():
    a = State(1, 0)
    b = State(2, 0)
    a.ivs[0] = 31
    assert b.ivs[0] == 255


def test_characteristic_starts_at_ec_when_all_perfect():
    state = State(0, 0, ec=3, ivs=[31] * 6)
    assert state.characteristic() == 3


def test_characteristic_without_perfect_iv_is_ec_mod_six():
    state = State(0, 0, ec=4, ivs=[0, 1, 2, 3, 4, 5])
    assert state.characteristic() == 4


def test_characteristic_wraps_ec():
    state = State(0, 0, ec=7, ivs=[10] * 6)
    assert state.characteristic() == 1


def test_characteristic_uses_speed_slot_order():
    state = State(0, 0, ec=2, ivs=[0, 0, 0, 0, 0, 31])
    assert state.characteristic() == 3


def test_characteristic_wraps_around_to_hp():
    state = State(0, 0, ec=5, ivs=[31, 0, 0, 0, 0, 0])
    assert state.characteristic() == 0


def test_characteristic_is_always_valid_index():
    rnd = random.Random(1)
    for _ in range(200):
        state = State(0, 0, ec=rnd.getrandbits(32), ivs=[rnd.randrange(32) for _ in range(6)])
        assert 0 <= state.characteristic() < 6