from life_grid import Grid
from console_game import console_game

GRID_SIZE = 20  # square grid, number of cells per side
LIVE_PROBABILITY = 30  # probability of living cell at the start, in %
FRAME_DELAY = 1  # seconds between frames


def game(size=GRID_SIZE, probability=LIVE_PROBABILITY, delay=FRAME_DELAY,
         steps=None):
    try:
        grid = Grid(size)
        grid.initialize_randomly(probability)
        return console_game(grid, steps=steps, delay=delay)
    except Exception as e:
        print(f"Game failed. Reason: {e}")


if __name__ == "__main__":
    game()
