"""Yahoo Transit search URL construction."""

from urllib.parse import urlencode

from .models import (
    SearchOptions,
    SearchRequest,
    SeatPreference,
    SortOrder,
    TicketType,
    TimeType,
    WalkSpeed,
)

YAHOO_TRANSIT_SEARCH_URL = "https://transit.yahoo.co.jp/search/result"

# type: 1=出発, 4=到着, 3=始発, 2=終電, 5=指定なし
TIME_TYPE_CODES = {
    TimeType.DEPARTURE: "1",
    TimeType.ARRIVAL: "4",
    TimeType.FIRST_TRAIN: "3",
    TimeType.LAST_TRAIN: "2",
    TimeType.UNSPECIFIED: "5",
}

# ticket: ic=ICカード優先, normal=きっぷ優先
TICKET_CODES = {
    TicketType.IC: "ic",
    TicketType.CASH: "normal",
}

# expkind: 1=自由席優先, 2=指定席優先, 3=グリーン車優先
SEAT_PREFERENCE_CODES = {
    SeatPreference.NON_RESERVED: "1",
    SeatPreference.RESERVED: "2",
    SeatPreference.GREEN: "3",
}
DEFAULT_SEAT_PREFERENCE_CODE = "1"

# ws: 1=急いで, 2=少し急いで, 3=少しゆっくり, 4=ゆっくり
WALK_SPEED_CODES = {
    WalkSpeed.FAST: "1",
    WalkSpeed.SLIGHTLY_FAST: "2",
    WalkSpeed.SLIGHTLY_SLOW: "3",
    WalkSpeed.SLOW: "4",
}

# s: 0=到着が早い順, 1=料金が安い順, 2=乗換回数順
SORT_ORDER_CODES = {
    SortOrder.TIME: "0",
    SortOrder.FARE: "1",
    SortOrder.TRANSFER: "2",
}


def _flag(enabled: bool) -> str:
    return "1" if enabled else "0"


def _option_params(options: SearchOptions) -> list[tuple[str, str]]:
    if options.seat_preference is None:
        expkind = DEFAULT_SEAT_PREFERENCE_CODE
    else:
        expkind = SEAT_PREFERENCE_CODES[options.seat_preference]

    return [
        ("type", TIME_TYPE_CODES[options.time_type]),
        ("ticket", TICKET_CODES[options.ticket]),
        ("expkind", expkind),
        ("ws", WALK_SPEED_CODES[options.walk_speed]),
        ("s", SORT_ORDER_CODES[options.sort_by]),
        ("al", _flag(options.use_airline)),
        ("shin", _flag(options.use_shinkansen)),
        ("ex", _flag(options.use_express)),
        ("hb", _flag(options.use_highway_bus)),
        ("lb", _flag(options.use_local_bus)),
        ("sr", _flag(options.use_ferry)),
    ]


def build_search_url(
    request: SearchRequest, base_url: str = YAHOO_TRANSIT_SEARCH_URL
) -> str:
    """Build the Yahoo Transit result URL for a search request.

    Month and day are zero-padded, the hour is not, and the minute is
    split into its tens digit (``m1``) and ones digit (``m2``) to match
    the site's two select boxes. Numeric fields are not range checked.
    Each via station becomes its own ``via`` parameter, in order, after
    the fixed parameters. The number of via stations is not capped here.

    Args:
        request: Resolved search request
        base_url: Search endpoint, without query string

    Returns:
        Absolute URL with an urlencoded query string
    """
    params: list[tuple[str, str]] = [
        ("from", request.from_station),
        ("to", request.to_station),
        ("y", str(request.year)),
        ("m", f"{request.month:02d}"),
        ("d", f"{request.day:02d}"),
        ("hh", str(request.hour)),
        ("m1", str(request.minute // 10)),
        ("m2", str(request.minute % 10)),
    ]
    params.extend(_option_params(request.options))
    params.extend(("via", station) for station in request.via)

    return f"{base_url}?{urlencode(params)}"
