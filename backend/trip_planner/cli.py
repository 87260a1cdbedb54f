import argparse
import logging
import sys
from typing import Callable, List, Optional

from rich.console import Console
from rich.markup import escape

from trip_planner.core.config import Settings, get_settings
from trip_planner.core.errors import InvalidBudget, TripPlannerError, WriteError
from trip_planner.core.logging import configure_logging
from trip_planner.models.domain import CityDetails, Destination, TourDetails
from trip_planner.planning.exporter import format_amount
from trip_planner.services.planning_service import PlanningService
from trip_planner.storage.repository import InMemoryRepository

logger = logging.getLogger(__name__)

MENU = [
    "1. View all destinations",
    "2. Add destination to plan",
    "3. View my travel plan",
    "4. Save plan to file",
    "5. Exit",
]


class TripPlannerCLI:
    """Numbered text menu over a PlanningService session."""

    def __init__(
        self,
        service: PlanningService,
        console: Optional[Console] = None,
        read_line: Optional[Callable[[str], str]] = None,
    ):
        self.service = service
        self.console = console or Console()
        self.read_line = read_line or self.console.input
        self.itinerary_id: Optional[str] = None

    def say(self, text: str = "") -> None:
        self.console.print(escape(text))

    def ask(self, prompt: str) -> str:
        return self.read_line(prompt).strip()

    def run(self, name: Optional[str] = None, budget: Optional[float] = None) -> int:
        self.console.rule("[bold cyan]SMART TRAVEL PLANNER[/]")
        try:
            if name is None:
                name = self.ask("Enter your name: ")
            self.itinerary_id = self._start_session(name, budget)
            while self._handle(self.ask("\n--- MENU ---\n" + "\n".join(MENU) + "\nChoice: ")):
                pass
        except (EOFError, KeyboardInterrupt):
            self.say("\nHappy travels! Goodbye!")
        return 0

    def _start_session(self, name: str, budget: Optional[float]) -> str:
        while True:
            if budget is None:
                raw = self.ask("Enter your budget ($): ")
                try:
                    budget = float(raw)
                except ValueError:
                    self.say("Error: Please enter valid numbers.")
                    continue
            try:
                return self.service.start_session(name, budget)
            except InvalidBudget as exc:
                self.say(f"Error: {exc}")
                budget = None

    def _handle(self, choice: str) -> bool:
        actions = {
            "1": self.show_catalog,
            "2": self.add_destination,
            "3": self.show_plan,
            "4": self.save_plan,
        }
        if choice == "5":
            self.say("\nHappy travels! Goodbye!")
            return False
        action = actions.get(choice)
        if action is None:
            self.say("Invalid choice. Try again.")
            return True
        try:
            action()
        except TripPlannerError as exc:
            self.say(f"Error: {exc}")
        except Exception as exc:  # noqa: BLE001
            logger.exception("Menu action %s failed", choice)
            self.say(f"Unexpected error: {exc}")
        return True

    def show_catalog(self) -> None:
        self.console.rule("[bold]AVAILABLE DESTINATIONS[/]")
        for number, dest in enumerate(self.service.list_destinations(), start=1):
            self.say(f"{number}. ")
            self.show_destination(dest)
            self.say()

    def show_destination(self, dest: Destination) -> None:
        self.say(f"Location: {dest.name}, {dest.country}")
        self.say(f"   {dest.description}")
        self.say(f"   Base Cost: {format_amount(dest.base_cost)}")
        details = dest.details
        if isinstance(details, CityDetails):
            self.say(f"   Transport: {format_amount(details.transport_cost)}")
            if details.attractions:
                self.say(f"   Attractions: {', '.join(details.attractions)}")
        elif isinstance(details, TourDetails):
            self.say(f"   Tour Type: {details.tour_type}")
            self.say(f"   Duration: {details.duration_days} days")
            self.say(f"   Daily Cost: {format_amount(details.daily_cost)}")
            self.say(f"   Total Tour Cost: {format_amount(dest.total_tour_cost)}")

    def add_destination(self) -> None:
        self.show_catalog()
        raw = self.ask("Enter destination number: ")
        try:
            number = int(raw)
        except ValueError:
            self.say("Error: Please enter valid numbers.")
            return
        dest = self.service.add_destination(self.itinerary_id, number)
        self.say(f"Added {dest.name} to your plan!")

    def show_plan(self) -> None:
        snapshot = self.service.get_itinerary(self.itinerary_id).snapshot()
        self.console.rule(f"[bold]YOUR TRAVEL PLAN - {escape(snapshot.traveler_name)}[/]")
        if not snapshot.stops:
            self.say("  No destinations selected yet.")
            return
        self.say("Itinerary:\n")
        for number, dest in enumerate(snapshot.stops, start=1):
            self.say(f"Stop {number}:")
            self.show_destination(dest)
            self.say()

        ledger = snapshot.ledger
        self.console.rule("[bold]COST BREAKDOWN[/]")
        for item in ledger.line_items:
            self.say(f"  - {item.label}: {format_amount(item.amount)}")
        self.say(f"\n  Total Cost: {format_amount(ledger.total_cost)}")
        self.say(f"  Your Budget: {format_amount(ledger.budget)}")
        self.say(f"  Remaining: {format_amount(ledger.remaining)}")
        if ledger.within_budget:
            self.console.print("  [green]Within budget![/]")
        else:
            self.console.print(
                f"  [red]Over budget by {escape(format_amount(ledger.over_budget_by))}[/]"
            )

    def save_plan(self) -> None:
        filename = self.ask("Enter filename (e.g., myplan.txt): ")
        try:
            path = self.service.export_itinerary(self.itinerary_id, filename)
        except WriteError as exc:
            self.say(f"Error saving file: {exc}")
            return
        self.say(f"\nTravel plan saved to {path}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="trip-planner", description="Plan a trip from the console.")
    p.add_argument("--name", help="traveler name (prompted when omitted)")
    p.add_argument("--budget", type=float, help="trip budget in dollars (prompted when omitted)")
    p.add_argument(
        "--import",
        dest="imports",
        action="append",
        default=[],
        metavar="FILE_OR_URL",
        help="extra destinations, one 'name,country,cost,description' per line",
    )
    p.add_argument("--log-level", help="overrides LOG_LEVEL")
    return p


def main(
    argv: Optional[List[str]] = None,
    console: Optional[Console] = None,
    read_line: Optional[Callable[[str], str]] = None,
    settings: Optional[Settings] = None,
) -> int:
    args = build_parser().parse_args(argv)
    settings = settings or get_settings()
    configure_logging(args.log_level or settings.log_level)

    service = PlanningService(repository=InMemoryRepository(), settings=settings)
    cli = TripPlannerCLI(service, console=console, read_line=read_line)
    try:
        service.load_catalog()
    except TripPlannerError as exc:
        cli.say(f"Error: {exc}")
    for source in args.imports:
        try:
            count = service.import_destinations(source)
        except TripPlannerError as exc:
            cli.say(f"Error: {exc}")
            continue
        cli.say(f"Loaded {count} destinations from {source}")

    name = args.name if args.name is not None else (settings.default_traveler or None)
    return cli.run(name=name, budget=args.budget)


if __name__ == "__main__":
    sys.exit(main())
