"""
Interactive demo for chargrid.
Display a map and walk an agent over it, rotating rows and columns under it.
"""

import logging
import sys

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import render_grid
from chargrid import Grid
from grid_types import Direction, Point

AGENT = "@"
FLOOR = "."

MOVE_KEYS = {
    "w": Direction.N,
    "a": Direction.W,
    "s": Direction.S,
    "d": Direction.E,
}


class InteractiveDemo:
    """Interactive demo for walking and line rotation."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self.original_grid = grid.copy()  # Keep a copy of the original state
        self.console = Console()
        self.status_message = "Ready"

    @property
    def agent_position(self) -> Point | None:
        """Dynamically find current agent position."""
        found = self.grid.get_value(AGENT)
        return found[0] if found else None

    def generate_display(self) -> Panel:
        """Generate the current display with grid and status."""
        agent = self.agent_position

        if agent is None:
            status = Text()
            status.append("ERROR: No agent cell found!\n", style="bold red")
            status.append(f"Please ensure a cell holds '{AGENT}'.\n")
            return Panel(status, title="chargrid - Error", border_style="red")

        status = Text()
        status.append("Agent Position: ", style="bold")
        status.append(f"(x: {agent.x}, y: {agent.y})\n\n")

        status.append(Text.from_ansi(render_grid(self.grid, highlight=[agent])))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  W/A/S/D - Move North/West/South/East\n")
        status.append("  J/L - Rotate agent's row left/right\n")
        status.append("  I/K - Rotate agent's column up/down\n")
        status.append("  R - Reset to original grid\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="chargrid Interactive Demo", border_style="green", width=80)

    def attempt_move(self, direction: Direction) -> None:
        """Step the agent onto a floor cell in the given direction."""
        agent = self.agent_position
        if agent is None:
            self.status_message = "ERROR: No agent cell found!"
            return

        target = self.grid.neighbor_if(
            agent, direction, lambda p, _d: self.grid[p] == FLOOR
        )
        if target is None:
            self.status_message = f"✗ Blocked moving {direction.value}"
            return

        point, _ = target
        self.grid.fill([(agent, FLOOR), (point, AGENT)])
        self.status_message = f"✓ Moved {direction.value} to (x: {point.x}, y: {point.y})"

    def rotate_row(self, left: bool) -> None:
        agent = self.agent_position
        if agent is None:
            return
        if left:
            self.grid.row_rotate_left(agent.y, 1)
        else:
            self.grid.row_rotate_right(agent.y, 1)
        self.status_message = f"Rotated row {agent.y} {'left' if left else 'right'}"

    def rotate_col(self, up: bool) -> None:
        agent = self.agent_position
        if agent is None:
            return
        if up:
            self.grid.col_rotate_up(agent.x, 1)
        else:
            self.grid.col_rotate_down(agent.x, 1)
        self.status_message = f"Rotated column {agent.x} {'up' if up else 'down'}"

    def reset_grid(self) -> None:
        """Reset the grid to its original state."""
        self.grid = self.original_grid.copy()
        self.status_message = "Grid reset to original state"

    def handle_key(self, key: str) -> bool:
        """Apply one key press. Returns False when the demo should stop."""
        key = key.lower()
        if key == "q":
            self.status_message = "Quitting..."
            return False
        if key == "r":
            self.reset_grid()
        elif key in MOVE_KEYS:
            self.attempt_move(MOVE_KEYS[key])
        elif key in ("j", "l"):
            self.rotate_row(left=key == "j")
        elif key in ("i", "k"):
            self.rotate_col(up=key == "i")
        else:
            self.status_message = f"Unknown key: {repr(key)}"
        return True

    def run(self) -> None:
        """Run the interactive demo."""
        if self.agent_position is None:
            print("ERROR: No agent cell found in grid!")
            print(f"Please ensure a cell holds '{AGENT}'.")
            return

        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())
                    if not self.handle_key(readchar.readkey()):
                        live.update(self.generate_display())
                        break
            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


LAYOUTS = dict(
    room=[
        "##########",
        "#........#",
        "#..#.....#",
        "#..#..@..#",
        "#........#",
        "#....##..#",
        "##########",
    ],
    open=[
        "....",
        ".@..",
        "....",
    ],
)


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "sublime":
        # Running from IDE - just render the initial state
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")
        print("Running from IDE - rendering initial state")
        print()
        grid = Grid.from_lines(LAYOUTS["room"])
        print(render_grid(grid, highlight=grid.get_value(AGENT)))
    else:
        grid = Grid.from_lines(LAYOUTS[sys.argv[1] if len(sys.argv) > 1 else "room"])
        InteractiveDemo(grid).run()
