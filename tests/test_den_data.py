import pytest

from raidseeker import den_data


def test_table_has_all_dens():
    locations = [den_data.get_location(index) for index in range(276)]
    assert len(locations) == 276
    assert min(locations) == 0
    assert max(locations) == 43
    with pytest.raises(IndexError):
        den_data.get_location(276)


def test_first_den_values():
    assert den_data.den_hash(0, 0) == 0x173F0456DC5DFC52
    assert den_data.den_hash(0, 1) == 0xBA83E1671012EBCD
    assert den_data.get_location(0) == 12
    assert den_data.get_coordinates(0) == (185, 977)


def test_last_den_values():
    assert den_data.den_hash(275, 0) == 0x42B21EFC37C7B974
    assert den_data.den_hash(275, 1) == 0x9D415F6A7A841DD9
    assert den_data.get_location(275) == 43


def test_special_den_has_no_tables():
    assert den_data.den_hash(16, 0) == 0
    assert den_data.den_hash(16, 1) == 0
    assert den_data.get_coordinates(16) == (50, 700)


@pytest.mark.parametrize("rarity", [0, 1])
def test_event_index_maps_to_event_hash(rarity):
    assert den_data.den_hash(den_data.EVENT_DEN_INDEX, rarity) == 0x17E59BBD874FD95C


def test_hashes_fit_in_64_bits():
    for index in range(den_data.DEN_COUNT):
        for rarity in (0, 1):
            assert 0 <= den_data.den_hash(index, rarity) < 1 << 64


def test_dens_without_map_position_are_in_late_locations():
    for index in range(den_data.DEN_COUNT):
        if den_data.get_location(index) >= 32:
            assert den_data.get_coordinates(index) == (0, 0)


def test_coordinates_match_table_rows():
    for index, row in enumerate(den_data.DEN_INFO):
        assert den_data.get_coordinates(index) == (row[3], row[4])
        assert den_data.get_location(index) == row[2]


@pytest.mark.parametrize("rarity", [2, -1])
def test_invalid_rarity_raises(rarity):
    with pytest.raises(ValueError):
        den_data.den_hash(0, rarity)


@pytest.mark.parametrize("index", [276, -1])
def test_invalid_index_raises(index):
    with pytest.raises(IndexError):
        den_data.den_hash(index, 0)
    with pytest.raises(IndexError):
        den_data.get_location(index)
    with pytest.raises(IndexError):
        den_data.get_coordinates(index)