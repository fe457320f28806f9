import time

import config
from gamelog import GameLog
from grid import get_distance
from snapshot import build_snapshot
from space import SpaceMap, is_small_space


class Candidate:
    """
    One legal next-head cell and what we learned about it
    """

    def __init__(self, direction, pos):
        self.direction = direction
        self.pos = pos
        self.nlonger = 0
        self.nshorter = 0
        self.alternate = 0
        self.region = None

    @property
    def threatened(self):
        return self.nlonger > 0

    def __repr__(self):
        return (f"Candidate({self.direction}, {tuple(self.pos)}, longer={self.nlonger}, "
                f"shorter={self.nshorter}, alternate={self.alternate})")


def decide_move(game_id, turn, board_dimensions, food_positions, all_snakes,
                own_snake, own_health, contexts=None, log=None):
    """
    Pick this turn's direction: "up", "down", "left" or "right".

    Never raises for a game situation; every stage has a fallback so a
    direction is always returned.
    """
    start = time.perf_counter()
    if log is None:
        log = GameLog(contexts.color(game_id) if contexts is not None else "unknown")

    log.info("-------------------------------------------------------")
    log.info("Move turn=%d", turn)

    width, height = board_dimensions
    state = build_snapshot(game_id, turn, width, height, food_positions,
                           all_snakes, own_snake, contexts, log)

    direction = choose_direction(state, own_health, log)

    elapsed = (time.perf_counter() - start) * 1000
    log.info("Move result=%s, elapsed=%dms", direction, elapsed)
    return direction


def choose_direction(state, health, log):
    """
    Run the decision stages in order; the first one that settles on a
    direction wins.
    """
    if state.turn == 0 and state.food:
        return opening_move(state, log)

    candidates = legal_candidates(state, log)
    if not candidates:
        log.info("⚠️ No legal moves, accepting defeat with %s", config.DEFAULT_MOVE)
        return config.DEFAULT_MOVE
    if len(candidates) == 1:
        log.debug("Select %s because it is the only viable move", candidates[0].direction)
        return candidates[0].direction

    direction, candidates = filter_threats(state, candidates, health, log)
    if direction:
        return direction

    direction, candidates = filter_small_spaces(state, candidates, log)
    if direction:
        return direction

    return closest_food_move(state, candidates, log)


def opening_move(state, log):
    """
    Turn 0: nothing can be in the way yet, so head straight for the
    nearest food, x axis first
    """
    head = state.me.head
    target = state.food[0].pos
    log.debug("Turn=0 special case, head=(%d,%d), food=(%d,%d)",
              head.x, head.y, target.x, target.y)

    if target.x < head.x:
        return "left"
    if target.x > head.x:
        return "right"
    if target.y < head.y:
        return "up"
    return "down"


def is_blocked(state, pos):
    cell = state.grid.classify(pos)
    if cell.is_body or cell.is_head:
        return True
    return cell.is_tail and state.snakes[cell.snake].growing


def legal_candidates(state, log):
    candidates = []
    for direction, pos in state.grid.neighbours(state.me.head):
        if is_blocked(state, pos):
            continue
        log.debug("Add to possible moves: %s=(%d,%d)[%s]", direction, pos.x, pos.y,
                  state.grid.classify(pos).kind)
        candidates.append(Candidate(direction, pos))
    return candidates


def count_alternatives(state, enemy_head, excluded):
    """
    Escape squares an enemy head has besides the one we are considering.
    A square with food counts extra; a snake is unlikely to pass it up.
    """
    alternate = 0
    for _, pos in state.grid.neighbours(enemy_head):
        if pos == excluded:
            continue
        cell = state.grid.classify(pos)
        if cell.is_body or cell.is_head:
            continue
        alternate += 5 if cell.is_food else 1
    return alternate


def scan_heads(state, candidate):
    """
    Count enemy heads next to a candidate cell, split by whether they could
    win a head-to-head against us
    """
    my_head = state.me.head
    my_length = state.me.length
    for _, pos in state.grid.neighbours(candidate.pos):
        cell = state.grid.classify(pos)
        if not cell.is_head or pos == my_head:
            continue
        if state.snakes[cell.snake].length >= my_length:
            candidate.nlonger += 1
            candidate.alternate += count_alternatives(state, pos, candidate.pos)
        else:
            candidate.nshorter += 1


def filter_threats(state, candidates, health, log):
    """
    Drop moves that risk a head-to-head with an equal or longer snake, and
    take a kill on a shorter one when health allows.

    Returns (direction, remaining); direction is None to keep going.
    """
    for candidate in candidates:
        scan_heads(state, candidate)

    safe = [c for c in candidates if not c.threatened]
    if not safe:
        best = candidates[0]
        for candidate in candidates[1:]:
            if (candidate.nlonger < best.nlonger or
                    (candidate.nlonger == best.nlonger and candidate.alternate > best.alternate)):
                best = candidate
        log.debug("All our choices are threatened by longer snakes, choose %s where they have "
                  "more alternatives", best.direction)
        return best.direction, [best]

    for candidate in candidates:
        if candidate.threatened:
            log.debug("Direction %s is threatened by a longer snake", candidate.direction)

    nearest_food = state.food[0].dist if state.food else 0
    for candidate in safe:
        if candidate.nshorter > 0 and health > nearest_food:
            log.debug("Select %s because we have the opportunity to eat a shorter snake",
                      candidate.direction)
            return candidate.direction, [candidate]

    if len(safe) == 1:
        log.debug("Select %s because it is the only unthreatened move", safe[0].direction)
        return safe[0].direction, safe

    return None, safe


def filter_small_spaces(state, candidates, log):
    """
    Drop moves into spaces too small for us to live in. If every space is
    too small, take the largest one.
    """
    space_map = SpaceMap(state)
    my_length = state.me.length

    roomy = []
    for candidate in candidates:
        candidate.region = space_map.region_for(candidate.pos)
        log.debug("Direction %s opens onto %r", candidate.direction, candidate.region)
        if is_small_space(candidate.region, my_length):
            log.debug("Direction %s is a small space", candidate.direction)
            continue
        roomy.append(candidate)

    if not roomy:
        largest = candidates[0]
        for candidate in candidates[1:]:
            if candidate.region.size > largest.region.size:
                largest = candidate
        log.debug("All our choices are small spaces, so choose %s which is the largest of them",
                  largest.direction)
        return largest.direction, [largest]

    if len(roomy) == 1:
        log.debug("Select %s because it is the only move with enough room", roomy[0].direction)
        return roomy[0].direction, roomy

    return None, roomy


def food_progress(state, pos, contested_ok):
    """
    Distance from pos to the nearest food that pos is closer to than our
    head is, or None if no food gets closer
    """
    for item in state.food:
        dist = get_distance(pos, item.pos)
        if dist >= item.dist:
            continue
        if contested_ok or item.closer_snakes == 0:
            return dist
    return None


def closest_food_move(state, candidates, log):
    """
    Eat if we can, otherwise make the best progress toward food. With three
    or more snakes on the board we prefer food nobody else is closer to.
    """
    for candidate in candidates:
        if state.grid.classify(candidate.pos).is_food:
            log.debug("Select %s because there is a food disc there", candidate.direction)
            return candidate.direction

    crowded = len(state.snakes) >= 3
    no_progress = state.width + state.height

    def distances(contested_ok):
        result = []
        for candidate in candidates:
            dist = food_progress(state, candidate.pos, contested_ok)
            result.append(no_progress if dist is None else dist)
        return result

    dists = distances(contested_ok=not crowded)
    if crowded and all(d == no_progress for d in dists):
        dists = distances(contested_ok=True)

    best = 0
    for index, dist in enumerate(dists):
        if dist < dists[best]:
            best = index

    log.debug("Select %s because it makes the best progress toward food", candidates[best].direction)
    return candidates[best].direction
