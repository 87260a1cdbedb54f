from __future__ import annotations

import logging
import math
import re
from decimal import Decimal
from pathlib import Path
from typing import List, Tuple

from trip_planner.core.errors import WriteError
from trip_planner.models.domain import ItinerarySnapshot

logger = logging.getLogger(__name__)

RULE = "=" * 50
HEADER_PREFIX = "TRAVEL PLAN FOR: "

_STOP_RE = re.compile(r"^Stop (\d+): (.*)$")
_COST_RE = re.compile(r"^Cost: \$(.*)$")


def java_double(value: float) -> str:
    """
    Text of a double as the original program wrote it: plain notation between
    1e-3 and 1e7, ``1.0E7`` style outside, ``NaN`` and ``Infinity`` spelled out.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    magnitude = abs(value)
    if magnitude == 0 or 1e-3 <= magnitude < 1e7:
        return repr(value)
    sign, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
    mantissa = "".join(str(d) for d in digits[1:]) or "0"
    scale = len(digits) - 1 + exponent
    return f"{'-' if sign else ''}{digits[0]}.{mantissa}E{scale}"


def format_amount(value: float) -> str:
    return f"${java_double(value)}"


def render_plan(snapshot: ItinerarySnapshot) -> str:
    lines: List[str] = [f"{HEADER_PREFIX}{snapshot.traveler_name}", RULE, ""]
    for number, dest in enumerate(snapshot.stops, start=1):
        lines.append(f"Stop {number}: {dest.name}, {dest.country}")
        lines.append(f"Cost: {format_amount(dest.base_cost)}")
        lines.append("")
    ledger = snapshot.ledger
    lines.append(f"Total Budget: {format_amount(ledger.budget)}")
    lines.append(f"Total Cost: {format_amount(ledger.total_cost)}")
    lines.append(f"Remaining: {format_amount(ledger.remaining)}")
    return "\n".join(lines) + "\n"


def parse_stops(text: str) -> List[Tuple[str, str, float]]:
    """Read the ``Stop n`` blocks of an exported plan back as (name, country, cost)."""
    stops: List[Tuple[str, str, float]] = []
    pending: Tuple[str, str] | None = None
    for line in text.splitlines():
        stop = _STOP_RE.match(line)
        if stop:
            # country is written last, so split on the final separator
            name, _, country = stop.group(2).rpartition(", ")
            pending = (name, country)
            continue
        cost = _COST_RE.match(line)
        if cost and pending is not None:
            stops.append((pending[0], pending[1], float(cost.group(1))))
            pending = None
    return stops


def save_plan(snapshot: ItinerarySnapshot, path: str | Path) -> Path:
    path = Path(path)
    content = render_plan(snapshot)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise WriteError(f"Cannot write {path}: {exc}") from exc
    logger.info("Travel plan saved to %s", path)
    return path
