import config

LEVELS = {"DEBUG": 10, "INFO": 20}


class GameLog:
    """
    Prints one line per event, tagged with level and the game's colour
    """

    def __init__(self, color, level=None):
        self.color = color
        self.threshold = LEVELS.get(level or config.LOG_LEVEL, LEVELS["INFO"])

    def _emit(self, level, message, *args):
        if LEVELS[level] < self.threshold:
            return
        if args:
            message = message % args
        print(f"{level}({self.color}): {message}")

    def debug(self, message, *args):
        self._emit("DEBUG", message, *args)

    def info(self, message, *args):
        self._emit("INFO", message, *args)
