class TripPlannerError(Exception):
    """Base class for errors raised by the planner."""


class InvalidBudget(TripPlannerError):
    def __init__(self, budget: float):
        super().__init__("Budget must be greater than zero!")
        self.budget = budget


class OutOfRange(TripPlannerError):
    def __init__(self, index: int):
        super().__init__(f"Destination not found at index: {index}")
        self.index = index


class ReadError(TripPlannerError):
    """Import source could not be opened or read."""


class ParseError(ReadError):
    """A well-formed import line carried a cost that is not a number."""


class WriteError(TripPlannerError):
    """Export file could not be written."""


class ItineraryNotFound(TripPlannerError):
    def __init__(self, itinerary_id: str):
        super().__init__(f"Itinerary not found: {itinerary_id}")
        self.itinerary_id = itinerary_id


class PreconditionError(TripPlannerError):
    """Operation called out of sequence; a programming error, not user input."""


class NoBudgetSet(PreconditionError):
    def __init__(self) -> None:
        super().__init__("set_budget() must be called before adding destinations")


class BudgetAlreadySet(PreconditionError):
    def __init__(self) -> None:
        super().__init__("Budget has already been set for this itinerary")
