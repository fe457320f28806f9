from collections import namedtuple

Coord = namedtuple("Coord", ["x", "y"])

EMPTY = "empty"
FOOD = "food"
BODY = "body"
HEAD = "head"
TAIL = "tail"


class Cell(namedtuple("Cell", ["kind", "snake"])):
    """
    Content of one board square: empty, food, or a body/head/tail of snake N
    """
    __slots__ = ()

    @property
    def is_empty(self):
        return self.kind == EMPTY

    @property
    def is_food(self):
        return self.kind == FOOD

    @property
    def is_body(self):
        return self.kind == BODY

    @property
    def is_head(self):
        return self.kind == HEAD

    @property
    def is_tail(self):
        return self.kind == TAIL

    @property
    def is_snake(self):
        return self.kind in (BODY, HEAD, TAIL)


EMPTY_CELL = Cell(EMPTY, None)
FOOD_CELL = Cell(FOOD, None)


def body_cell(snake_no):
    return Cell(BODY, snake_no)


def head_cell(snake_no):
    return Cell(HEAD, snake_no)


def tail_cell(snake_no):
    return Cell(TAIL, snake_no)


def get_distance(point1, point2):
    """
    Calculate Manhattan distance between two points
    """
    return abs(point1.x - point2.x) + abs(point1.y - point2.y)


def get_neighbours(pos, board_width, board_height):
    """
    On-board neighbours of a cell as (direction, coord) pairs.

    The order is always left, right, up, down and is relied upon for
    tie-breaking. "up" decreases y.
    """
    moves = []
    if pos.x > 0:
        moves.append(("left", Coord(pos.x - 1, pos.y)))
    if pos.x < board_width - 1:
        moves.append(("right", Coord(pos.x + 1, pos.y)))
    if pos.y > 0:
        moves.append(("up", Coord(pos.x, pos.y - 1)))
    if pos.y < board_height - 1:
        moves.append(("down", Coord(pos.x, pos.y + 1)))
    return moves


class OccupancyGrid:
    """
    Dense width x height board of cells, indexed grid[x][y], plus one
    region tag per cell (0 means not yet claimed by a flood fill).
    """

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.cells = [[EMPTY_CELL] * height for _ in range(width)]
        self.regions = [[0] * height for _ in range(width)]

    def classify(self, pos):
        return self.cells[pos.x][pos.y]

    def set(self, pos, cell):
        self.cells[pos.x][pos.y] = cell

    def region_of(self, pos):
        return self.regions[pos.x][pos.y]

    def tag(self, pos, region_id):
        self.regions[pos.x][pos.y] = region_id

    def reset_regions(self):
        self.regions = [[0] * self.height for _ in range(self.width)]

    def neighbours(self, pos):
        return get_neighbours(pos, self.width, self.height)
