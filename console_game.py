from time import perf_counter, sleep
import os


def format_grid(grid):
    lines = []
    for r in range(grid.size):
        row = ''.join('*' if grid.is_alive(r, c) else ' '
                      for c in range(grid.size))
        lines.append(f"{row} {r}")  # row index after each line
    return '\n'.join(lines)


def print_grid(grid):
    os.system('cls' if os.name == 'nt' else 'clear')
    print(format_grid(grid))


def print_summary(num_of_iterations, total_time):
    print(f"\nGenerations: {num_of_iterations}")
    if num_of_iterations:
        print(f"Average execution time of the step: "
              f"{total_time / num_of_iterations:.8f} seconds")
    print(f"Total time for {num_of_iterations} steps: "
          f"{total_time:.8f} seconds")


def console_game(grid, steps=None, delay=1):
    """Draw, step and sleep until `steps` generations ran or Ctrl+C.

    steps=None means run forever. Returns the number of generations run.
    """
    num_of_iterations = 0
    total_time = 0  # Time only counts execution of: grid.step()

    try:
        while steps is None or num_of_iterations < steps:
            print_grid(grid)
            st = perf_counter()
            grid.step()
            end = perf_counter()
            total_time += (end - st)
            num_of_iterations += 1
            sleep(delay)
    except KeyboardInterrupt:
        print("\nConsole_game finished by KeyboardInterrupt.")

    print_summary(num_of_iterations, total_time)
    return num_of_iterations
