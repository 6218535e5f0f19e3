"""Interactive terminal menu for loading, displaying and sorting bids."""

from __future__ import annotations

from typing import TextIO

from loguru import logger
from rich.console import Console
from rich.markup import escape

from .state import AppState, SortAlgorithm, load, sort_bids
from .timing import Timing

MENU = (
    "Menu:\n"
    "  1. Load Bids\n"
    "  2. Display All Bids\n"
    "  3. Selection Sort All Bids\n"
    "  4. Quick Sort All Bids\n"
    "  9. Exit"
)

EXIT_CHOICE = 9
MAX_ERRORS_SHOWN = 5


class MenuDriver:
    """Numbered-menu loop over an AppState.

    Reads choices until 9, EOF or Ctrl+C. ``stream`` replaces stdin when
    given (used by tests and scripted runs).
    """

    def __init__(self, state: AppState, *, console: Console | None = None, stream: TextIO | None = None):
        self.state = state
        self.console = console or Console(highlight=False)
        self.stream = stream

    def run(self) -> None:
        """Show the menu and dispatch choices until the user exits."""
        while True:
            self.console.print(MENU, markup=False)
            choice = self._read_choice()
            if choice is None or choice == EXIT_CHOICE:
                break
            self.dispatch(choice)

        self.console.print("Good bye.")

    def _read_choice(self) -> int | None:
        """Return the entered number, 0 for unusable input, None at end of input."""
        try:
            raw = self.console.input("Enter choice: ", stream=self.stream)
        except (EOFError, KeyboardInterrupt):
            self.console.print()
            return None

        if self.stream is not None and raw == "":
            return None
        try:
            return int(raw.strip())
        except ValueError:
            return 0

    def dispatch(self, choice: int) -> None:
        """Run one menu action."""
        if choice == 1:
            self.load_bids()
        elif choice == 2:
            self.display_bids()
        elif choice == 3:
            self.sort(SortAlgorithm.SELECTION)
        elif choice == 4:
            self.sort(SortAlgorithm.QUICK)
        else:
            logger.debug(f"Ignoring menu choice {choice}")
            self.console.print("[dim]Please choose 1, 2, 3, 4 or 9.[/dim]")

    def load_bids(self) -> None:
        timing = load(self.state)
        result = self.state.last_load

        if result is not None:
            for error in result.errors[:MAX_ERRORS_SHOWN]:
                self.console.print(f"[yellow]Warning:[/yellow] {escape(str(error))}")
            hidden = len(result.errors) - MAX_ERRORS_SHOWN
            if hidden > 0:
                self.console.print(f"[yellow]... and {hidden} more problems[/yellow]")

        self.console.print(f"{len(self.state.bids)} bids read")
        self._print_timing("time: {ticks} clock ticks", "time: {seconds} seconds", timing)

    def display_bids(self) -> None:
        for bid in self.state.bids:
            self.console.print(bid.format_line(), markup=False)
        self.console.print()

    def sort(self, algorithm: SortAlgorithm) -> None:
        timing = sort_bids(self.state, algorithm)
        self._print_timing(
            f"{algorithm.label} completed in {{ticks}} clock ticks.",
            f"{algorithm.label} completed in {{seconds}} seconds.",
            timing,
        )

    def _print_timing(self, ticks_fmt: str, seconds_fmt: str, timing: Timing) -> None:
        self.console.print(ticks_fmt.format(ticks=timing.ticks), markup=False)
        self.console.print(seconds_fmt.format(seconds=timing.seconds), markup=False)
