"""Data models for Yahoo Transit route search."""

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError

MAX_VIA_STATIONS = 3


class TimeType(str, Enum):
    """What the requested date/time refers to."""

    DEPARTURE = "departure"
    ARRIVAL = "arrival"
    FIRST_TRAIN = "first_train"
    LAST_TRAIN = "last_train"
    UNSPECIFIED = "unspecified"


class TicketType(str, Enum):
    """Fare calculation basis."""

    IC = "ic"
    CASH = "cash"


class SeatPreference(str, Enum):
    """Seat class to prioritise on limited express and shinkansen."""

    NON_RESERVED = "non_reserved"
    RESERVED = "reserved"
    GREEN = "green"


class WalkSpeed(str, Enum):
    """Walking speed used for transfer times."""

    FAST = "fast"
    SLIGHTLY_FAST = "slightly_fast"
    SLIGHTLY_SLOW = "slightly_slow"
    SLOW = "slow"


class SortOrder(str, Enum):
    """Ordering of the returned routes."""

    TIME = "time"
    FARE = "fare"
    TRANSFER = "transfer"


class SearchOptions(BaseModel):
    """Search preferences sent to Yahoo Transit."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    time_type: TimeType = Field(
        TimeType.DEPARTURE, alias="timeType", description="Time type"
    )
    ticket: TicketType = Field(TicketType.IC, description="Fare type")
    seat_preference: SeatPreference | None = Field(
        SeatPreference.NON_RESERVED,
        alias="seatPreference",
        description="Seat preference (None sends the site default)",
    )
    walk_speed: WalkSpeed = Field(
        WalkSpeed.SLIGHTLY_SLOW, alias="walkSpeed", description="Walking speed"
    )
    sort_by: SortOrder = Field(SortOrder.TIME, alias="sortBy", description="Sort order")
    use_airline: bool = Field(True, alias="useAirline", description="Use airlines")
    use_shinkansen: bool = Field(
        True, alias="useShinkansen", description="Use shinkansen"
    )
    use_express: bool = Field(
        True, alias="useExpress", description="Use paid express trains"
    )
    use_highway_bus: bool = Field(
        True, alias="useHighwayBus", description="Use highway buses"
    )
    use_local_bus: bool = Field(True, alias="useLocalBus", description="Use local buses")
    use_ferry: bool = Field(True, alias="useFerry", description="Use ferries")


class SearchRequest(BaseModel):
    """A fully resolved route search."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_station: str = Field(..., alias="from", description="Departure station name")
    to_station: str = Field(..., alias="to", description="Arrival station name")
    via: tuple[str, ...] = Field(
        default_factory=tuple, description="Via stations, in order"
    )
    year: int = Field(..., description="Year")
    month: int = Field(..., description="Month (not range checked)")
    day: int = Field(..., description="Day (not range checked)")
    hour: int = Field(..., description="Hour (not range checked)")
    minute: int = Field(..., description="Minute (not range checked)")
    options: SearchOptions = Field(default_factory=SearchOptions)

    def __str__(self) -> str:
        via = f" via {'・'.join(self.via)}" if self.via else ""
        return (
            f"{self.from_station} → {self.to_station}{via} "
            f"{self.year}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}"
        )

    def to_yahoo_url(self) -> str:
        """Convert to Yahoo Transit search URL."""
        from .url_builder import build_search_url

        return build_search_url(self)


def _option_values(arguments: Mapping[str, Any]) -> dict[str, Any]:
    """Collect the option fields actually supplied by the caller."""
    values: dict[str, Any] = {}
    for name, field in SearchOptions.model_fields.items():
        for key in (field.alias, name):
            if key and arguments.get(key) is not None:
                values[name] = arguments[key]
                break
    return values


def build_search_request(arguments: Mapping[str, Any], now: datetime) -> SearchRequest:
    """Resolve raw tool arguments into a SearchRequest.

    Date and time fields fall back to the matching component of ``now``
    one by one, so supplied fields are never overwritten. Via stations
    beyond MAX_VIA_STATIONS are dropped and omitted options take their
    defaults.

    Args:
        arguments: Tool arguments keyed by wire name (``from``, ``timeType``, ...)
        now: Current local time

    Returns:
        Resolved search request

    Raises:
        ValidationError: If the arguments do not form a valid request
    """

    def pick(key: str, fallback: int) -> Any:
        value = arguments.get(key)
        return fallback if value is None else value

    via = arguments.get("via") or []
    if isinstance(via, str):
        via = [via]

    try:
        return SearchRequest(
            from_station=arguments.get("from"),
            to_station=arguments.get("to"),
            via=tuple(via)[:MAX_VIA_STATIONS],
            year=pick("year", now.year),
            month=pick("month", now.month),
            day=pick("day", now.day),
            hour=pick("hour", now.hour),
            minute=pick("minute", now.minute),
            options=SearchOptions(**_option_values(arguments)),
        )
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid search arguments: {e}") from e
