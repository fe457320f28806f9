import pytest

from grid import Coord
from snapshot import build_snapshot
from space import Region, SpaceMap, map_space, space_threshold, is_small_space


def state_for(snakes, you, turn=5, food=(), size=(5, 5)):
    return build_snapshot("g1", turn, size[0], size[1],
                          [Coord(x, y) for x, y in food], snakes, you)


@pytest.fixture
def walled(make_snake):
    """
    5x5 board: we sit top-middle with our body running down column 2, two
    short rivals close off a 2-cell pocket on the left and a 4-cell pocket
    on the right
    """
    me = make_snake("me", (2, 0), (2, 1), (2, 2), (2, 3), (2, 4))
    left = make_snake("left", (0, 1), (1, 1))
    right = make_snake("right", (4, 2), (3, 2))
    return state_for([me, left, right], me, turn=1)


def test_flood_counts_free_cells_and_food(make_snake):
    me = make_snake("me", (1, 1), (1, 2))
    state = state_for([me], me, food=[(0, 0), (4, 4)])
    region = Region(1)

    count = map_space(state, Coord(0, 1), region)

    # 25 cells less our head; the non-growing tail frees up
    assert count == 24
    assert region.size == 24
    assert region.food == 2
    assert region.snakes == {0}
    assert region.self_bounded


def test_growing_tail_is_a_wall(make_snake):
    me = make_snake("me", (1, 1), (1, 2))
    state = state_for([me], me, turn=1)
    region = Region(1)

    map_space(state, Coord(0, 1), region)

    assert region.size == 23
    assert state.grid.region_of(Coord(1, 2)) == 0


def test_rival_bodies_bound_the_region(walled):
    space_map = SpaceMap(walled)
    left = space_map.region_for(Coord(1, 0))
    right = space_map.region_for(Coord(3, 0))

    assert left.size == 2
    assert right.size == 4
    assert left.id != right.id
    assert not left.self_bounded
    assert left.snake_count == 2
    assert 0 in right.snakes


def test_shared_region_mapped_once(make_snake):
    me = make_snake("me", (2, 2), (2, 3), (2, 4))
    state = state_for([me], me)
    space_map = SpaceMap(state)

    left = space_map.region_for(Coord(1, 2))
    right = space_map.region_for(Coord(3, 2))
    up = space_map.region_for(Coord(2, 1))

    assert left is right is up
    assert len(space_map.regions) == 1
    # 25 less head and body; the tail at (2,4) frees up
    assert left.size == 23


def test_every_reachable_cell_in_exactly_one_region(walled):
    space_map = SpaceMap(walled)
    for pos in (Coord(1, 0), Coord(3, 0)):
        space_map.region_for(pos)

    grid = walled.grid
    tagged = {}
    for x in range(grid.width):
        for y in range(grid.height):
            region_id = grid.region_of(Coord(x, y))
            if region_id:
                tagged.setdefault(region_id, []).append(Coord(x, y))

    assert sorted(tagged) == sorted(space_map.regions)
    for region_id, cells in tagged.items():
        assert len(cells) == space_map.regions[region_id].size
        for pos in cells:
            assert not grid.classify(pos).is_body
            assert not grid.classify(pos).is_head
    # the lower-left pocket is reachable from no candidate
    assert grid.region_of(Coord(0, 3)) == 0


def test_threshold_self_bounded_uses_half_length():
    region = Region(1)
    region.snakes = {0}
    region.size = 1

    assert space_threshold(region, 6, food_sign=-1) == 3
    assert space_threshold(region, 6, food_sign=1) == 3
    assert is_small_space(region, 6, food_sign=-1)
    assert is_small_space(region, 6, food_sign=1)


def test_threshold_food_adjustment():
    region = Region(1)
    region.snakes = {0}
    region.size = 3
    region.food = 2

    assert space_threshold(region, 8, food_sign=-1) == 2
    assert space_threshold(region, 8, food_sign=1) == 6
    assert not is_small_space(region, 8, food_sign=-1)
    assert is_small_space(region, 8, food_sign=1)


def test_threshold_shared_region_uses_full_length():
    region = Region(2)
    region.snakes = {0, 3}
    region.size = 5
    region.food = 4

    assert space_threshold(region, 6) == 6
    assert is_small_space(region, 6)
