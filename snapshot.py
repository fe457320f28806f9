from collections import namedtuple

from grid import (OccupancyGrid, FOOD_CELL, body_cell, head_cell, tail_cell,
                  get_distance)

# A snake as it arrives in a turn payload, body listed head first
Snake = namedtuple("Snake", ["id", "name", "health", "body"])


class SnakeState:
    """
    One snake on this turn's board: de-duplicated segments, head, tail,
    length, distance from its head to ours, and whether its tail will stay
    put this turn.
    """

    def __init__(self, snake_id, segments, dist, growing):
        self.id = snake_id
        self.segments = segments
        self.head = segments[0]
        self.tail = segments[-1]
        self.length = len(segments)
        self.dist = dist
        self.growing = growing

    def __repr__(self):
        return (f"SnakeState(id={self.id!r}, head={tuple(self.head)}, "
                f"length={self.length}, dist={self.dist}, growing={self.growing})")


class FoodState:
    """
    A food disc, its distance from our head and how many snakes are
    strictly closer to it than we are
    """

    def __init__(self, pos, dist, closer_snakes=0):
        self.pos = pos
        self.dist = dist
        self.closer_snakes = closer_snakes

    def __repr__(self):
        return f"FoodState(pos={tuple(self.pos)}, dist={self.dist}, closer_snakes={self.closer_snakes})"


class BoardState:
    """
    Everything the move cascade needs for one turn
    """

    def __init__(self, game_id, turn, grid, snakes, food):
        self.game_id = game_id
        self.turn = turn
        self.grid = grid
        self.snakes = snakes
        self.food = food

    @property
    def me(self):
        return self.snakes[0]

    @property
    def width(self):
        return self.grid.width

    @property
    def height(self):
        return self.grid.height


def dedupe(coords):
    """
    Drop repeated coordinates, keeping first occurrence order
    """
    seen = set()
    unique = []
    for c in coords:
        if c in seen:
            continue
        seen.add(c)
        unique.append(c)
    return unique


def build_snapshot(game_id, turn, board_width, board_height, food_positions,
                   all_snakes, own_snake, contexts=None, log=None):
    """
    Build the occupancy grid and the distance-sorted snake and food
    registries for one turn.

    Our own snake always ends up at index 0 of the snake registry. A game
    the context store has never seen gives no growth information beyond the
    opening turns.
    """
    grid = OccupancyGrid(board_width, board_height)
    my_head = own_snake.body[0]

    food_coords = dedupe(food_positions)
    for pos in food_coords:
        grid.set(pos, FOOD_CELL)

    food_last_turn = contexts.food_last_turn(game_id) if contexts is not None else frozenset()

    snakes = []
    for snake in all_snakes:
        segments = dedupe(snake.body)
        head = segments[0]
        growing = turn < 2 or head in food_last_turn
        snakes.append(SnakeState(snake.id, segments, get_distance(head, my_head), growing))

    # Only our own head is at distance 0; the id check keeps that explicit
    snakes.sort(key=lambda s: (s.dist, s.id != own_snake.id))

    for index, snake in enumerate(snakes):
        for segment in snake.segments:
            grid.set(segment, body_cell(index))
        grid.set(snake.tail, tail_cell(index))
        grid.set(snake.head, head_cell(index))

    food = []
    for pos in food_coords:
        dist = get_distance(pos, my_head)
        closer = sum(1 for s in snakes if get_distance(s.head, pos) < dist)
        food.append(FoodState(pos, dist, closer))

    # sort() is stable, so equal distances keep payload order
    food.sort(key=lambda f: f.dist)

    if log is not None:
        for snake in snakes:
            log.debug("Snake at: [H](%d,%d), [T](%d,%d), len=%d, dist=%d%s",
                      snake.head.x, snake.head.y, snake.tail.x, snake.tail.y,
                      snake.length, snake.dist, " growing" if snake.growing else "")
        for item in food:
            log.debug("Food at: (%d,%d), dist=%d", item.pos.x, item.pos.y, item.dist)

    return BoardState(game_id, turn, grid, snakes, food)
