import config


class Region:
    """
    A connected patch of free board reached from one of our candidate moves.

    `snakes` holds the registry index of every snake whose body or head
    touches the patch; index 0 is us.
    """

    def __init__(self, region_id):
        self.id = region_id
        self.size = 0
        self.food = 0
        self.snakes = set()

    @property
    def snake_count(self):
        return len(self.snakes)

    @property
    def self_bounded(self):
        return self.snakes == {0}

    def __repr__(self):
        return (f"Region(id={self.id}, size={self.size}, food={self.food}, "
                f"snakes={sorted(self.snakes)})")


def is_floodable(state, cell):
    if cell.is_empty or cell.is_food:
        return True
    # A tail only frees up if its snake did not just eat
    return cell.is_tail and not state.snakes[cell.snake].growing


def map_space(state, start, region):
    """
    Flood fill outward from start, tagging every reached cell with the
    region id.

    Uses an explicit stack so large boards cannot hit the recursion limit.
    Returns the number of cells claimed by this call.
    """
    grid = state.grid
    stack = [start]
    count = 0

    while stack:
        pos = stack.pop()
        if grid.region_of(pos) != 0:
            continue

        grid.tag(pos, region.id)
        count += 1
        if grid.classify(pos).is_food:
            region.food += 1

        for _, neighbour in grid.neighbours(pos):
            cell = grid.classify(neighbour)
            if is_floodable(state, cell):
                stack.append(neighbour)
            elif cell.is_body or cell.is_head:
                region.snakes.add(cell.snake)

    region.size += count
    return count


class SpaceMap:
    """
    Lazily maps the regions behind each candidate move, sharing one region
    between candidates that open onto the same space
    """

    def __init__(self, state):
        self.state = state
        self.regions = {}
        state.grid.reset_regions()

    def region_for(self, pos):
        region_id = self.state.grid.region_of(pos)
        if region_id == 0:
            region_id = len(self.regions) + 1
            region = Region(region_id)
            self.regions[region_id] = region
            map_space(self.state, pos, region)
        return self.regions[region_id]


def space_threshold(region, my_length, food_sign=None):
    """
    Smallest region we are willing to enter.

    Self-bounded: worst case we eat every disc inside and still need room to
    turn around, so half our length adjusted by the food count. Otherwise the
    whole length, even though the bounding snakes will move.
    """
    if food_sign is None:
        food_sign = config.SELF_BOUNDED_FOOD_SIGN
    if region.self_bounded:
        return my_length // 2 + food_sign * region.food
    return my_length


def is_small_space(region, my_length, food_sign=None):
    return region.size < space_threshold(region, my_length, food_sign)
