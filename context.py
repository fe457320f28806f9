import itertools
from threading import Lock

import config


class GameContext:
    """
    What we remember about one game between turns
    """

    def __init__(self, color):
        self.color = color
        self.heads = {}
        self.food = ()


class GameContextStore:
    """
    Per-game memory shared by every request thread.

    All reads and writes go through one lock held only long enough to copy
    or replace a field. Readers get immutable copies, never live objects.
    """

    def __init__(self, palette=None):
        self.palette = palette or config.PALETTE
        self._games = {}
        self._lock = Lock()
        self._picker = itertools.count()

    def _next_color(self):
        return self.palette[next(self._picker) % len(self.palette)]

    def start_game(self, game_id):
        """
        Create a fresh entry for the game and return its (name, hexcode) colour
        """
        with self._lock:
            color = self._next_color()
            self._games[game_id] = GameContext(color[0])
        return color

    def record_turn(self, game_id, snakes, food):
        heads = {snake.id: snake.body[0] for snake in snakes if snake.body}
        unique_food = tuple(dict.fromkeys(food))
        with self._lock:
            context = self._games.get(game_id)
            if context is None:
                # Server restarted mid-game, or /start was never seen
                context = GameContext(self._next_color()[0])
                self._games[game_id] = context
            context.heads = heads
            context.food = unique_food

    def end_game(self, game_id):
        with self._lock:
            self._games.pop(game_id, None)

    def food_last_turn(self, game_id):
        with self._lock:
            context = self._games.get(game_id)
            return frozenset(context.food) if context else frozenset()

    def heads_last_turn(self, game_id):
        with self._lock:
            context = self._games.get(game_id)
            return dict(context.heads) if context else {}

    def color(self, game_id):
        with self._lock:
            context = self._games.get(game_id)
            return context.color if context else "unknown"

    def __contains__(self, game_id):
        with self._lock:
            return game_id in self._games

    def __len__(self):
        with self._lock:
            return len(self._games)
