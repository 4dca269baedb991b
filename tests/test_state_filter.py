import pytest

from raidseeker.state import State
from raidseeker.state_filter import StateFilter


def make_state(gender=0, ability=0, nature=0, shiny=0, ivs=(31, 31, 31, 31, 31, 31)):
    return State(1, 0, nature=nature, ability=ability, gender=gender, shiny=shiny, ivs=list(ivs))


def test_default_filter_accepts_everything():
    state = make_state(gender=1, ability=2, nature=24, shiny=0, ivs=(0, 5, 10, 15, 20, 31))
    f = StateFilter()
    assert f.compare_state(state) is True
    assert f.compare_shiny(state) is True


def test_gender_mismatch_rejected():
    f = StateFilter(gender=1)
    assert f.compare_state(make_state(gender=0)) is False
    assert f.compare_state(make_state(gender=1)) is True


def test_ability_mismatch_rejected():
    f = StateFilter(ability=2)
    assert f.compare_state(make_state(ability=1)) is False
    assert f.compare_state(make_state(ability=2)) is True


def test_nature_list_is_respected():
    natures = tuple(i == 3 for i in range(25))
    f = StateFilter(natures=natures)
    assert f.compare_state(make_state(nature=3)) is True
    assert f.compare_state(make_state(nature=4)) is False


@pytest.mark.parametrize(
    "ivs,expected",
    [
        ((20, 20, 20, 20, 20, 20), True),
        ((10, 10, 10, 10, 10, 10), True),
        ((9, 20, 20, 20, 20, 20), False),
        ((20, 20, 20, 20, 20, 26), False),
    ],
)
def test_iv_ranges(ivs, expected):
    f = StateFilter(min_ivs=(10,) * 6, max_ivs=(25,) * 6)
    assert f.compare_state(make_state(ivs=ivs)) is expected


def test_skip_overrides_everything():
    f = StateFilter(gender=1, ability=2, shiny=2, skip=True, natures=(False,) * 25)
    state = make_state(gender=0, ability=0, shiny=0)
    assert f.compare_state(state) is True
    assert f.compare_shiny(state) is True


@pytest.mark.parametrize(
    "mask,shiny,expected",
    [(1, 1, True), (1, 2, False), (2, 2, True), (3, 1, True), (3, 0, False), (255, 0, True)],
)
def test_shiny_mask(mask, shiny, expected):
    assert StateFilter(shiny=mask).compare_shiny(make_state(shiny=shiny)) is expected