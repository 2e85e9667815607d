import logging

from tile2048 import Direction, GridEngine, OutcomeKind

NORMAL = "Good luck getting 2048!"
PAST_2048 = "See how far you can go!"
GAME_OVER = "Game Over!"

# tiles this front end knows how to draw
LABELS = {0: "."} | {2**i: str(2**i) for i in range(1, 13)}


def render(game: GridEngine) -> str:
    rows = []
    for row in game.state:
        rows.append(" ".join(f"{LABELS.get(v, '?'):>5}" for v in row))
    return "\n".join(rows)


def show(game: GridEngine, status: str):
    print(render(game))
    if any(v >= 2048 for row in game.state for v in row):
        encouragement = PAST_2048
    else:
        encouragement = NORMAL
    print(f"score: {game.score}  |  {GAME_OVER if game.is_over else encouragement}")
    print(status)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    game = GridEngine()

    key_mapping = {
        "w": Direction.UP,
        "d": Direction.RIGHT,
        "s": Direction.DOWN,
        "a": Direction.LEFT,
        # vim keys
        "k": Direction.UP,
        "l": Direction.RIGHT,
        "j": Direction.DOWN,
        "h": Direction.LEFT,
    }

    show(game, "w/a/s/d or h/j/k/l to move, r to reset, q to quit")

    while True:
        try:
            key = input().strip().lower()
        except EOFError:
            break
        if key == "q":
            break
        if key == "r":
            game.reset()
            show(game, "new game")
        elif key in key_mapping:
            outcome = game.move(key_mapping[key])
            status = f"{outcome.direction!s} pressed"
            if outcome.kind is OutcomeKind.REJECTED:
                # bell
                print("\a", end="")
            if outcome.exceeds_ceiling:
                status += f" (no tile for {', '.join(map(str, outcome.unsupported))})"
            show(game, status)
        else:
            show(game, "Illegal input received")
