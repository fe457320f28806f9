from flask import Flask, request, jsonify

import config
from context import GameContextStore
from decision import decide_move
from grid import Coord
from snapshot import Snake

app = Flask(__name__)

# Per-game memory shared across request threads
contexts = GameContextStore()


@app.route("/")
def index():
    """
    Root endpoint - returns Battlesnake metadata
    """
    return jsonify(config.SNAKE_META)


@app.route("/ping", methods=["GET", "POST"])
def ping():
    return "One ping only please."


@app.route("/start", methods=["POST"])
def start():
    """
    Called at the start of each game
    """
    game_data = request.get_json()
    game_id = game_data["game"]["id"]

    color_name, color_hex = contexts.start_game(game_id)
    snakes, food = parse_board(game_data["board"])
    contexts.record_turn(game_id, snakes, food)

    print(f"INFO({color_name}): Start game {game_id}")
    return jsonify({
        "color": color_hex,
        "headType": config.SNAKE_META["head"],
        "tailType": config.SNAKE_META["tail"]
    })


@app.route("/move", methods=["POST"])
def move():
    """
    Called every turn - return our move, then remember this board for next turn
    """
    game_data = request.get_json()

    game_id = game_data["game"]["id"]
    board = game_data["board"]
    snakes, food = parse_board(board)
    you = parse_snake(game_data["you"])

    chosen_move = decide_move(
        game_id, game_data["turn"], (board["width"], board["height"]),
        food, snakes, you, you.health, contexts
    )

    contexts.record_turn(game_id, snakes, food)
    return jsonify({"move": chosen_move})


@app.route("/end", methods=["POST"])
def end():
    """
    Called when the game ends
    """
    game_data = request.get_json()
    game_id = game_data["game"]["id"]
    print(f"INFO({contexts.color(game_id)}): Game ended: {game_id}")
    contexts.end_game(game_id)
    return "ok"


def parse_coord(point):
    return Coord(point["x"], point["y"])


def parse_snake(snake):
    return Snake(
        snake["id"],
        snake.get("name", ""),
        snake.get("health", 100),
        [parse_coord(segment) for segment in snake["body"]]
    )


def parse_board(board):
    """
    Snakes and food from a board payload
    """
    snakes = [parse_snake(s) for s in board["snakes"]]
    food = [parse_coord(f) for f in board["food"]]
    return snakes, food


if __name__ == "__main__":
    print(f"Starting Battlesnake Server at http://0.0.0.0:{config.PORT}...")
    app.run(host="0.0.0.0", port=config.PORT, threaded=True)
