"""Records kept by the ticket system: users, trains, stations, tickets and orders."""

from dataclasses import dataclass, field
from enum import Enum
from itertools import accumulate

from railledger.command import Command
from railledger.errors import IndexOutOfBound
from railledger.timetype import TimeType, parse_int

MAX_INT = 0x7FFFFFFF
MAX_STATIONS = 100


def _split(text):
    return list(Command(text, "|"))


@dataclass
class User:
    """An account; users are ordered by user name."""

    user_name: str
    name: str
    mail_addr: str
    password: str
    privilege: int = 0

    def __lt__(self, other):
        if not isinstance(other, User):
            return NotImplemented
        return self.user_name < other.user_name


@dataclass
class Train:
    """A train line; station positions are 1-based, list entry ``i - 1`` is station ``i``.

    Arrival and departure times are relative to the day the train leaves
    its first station.
    """

    train_id: str
    station_num: int
    seat_num: int
    stations: list
    price_sums: list
    start_time: TimeType
    arriving_times: list
    leaving_times: list
    start_sale_date: TimeType
    end_sale_date: TimeType
    train_type: str
    is_released: bool = False

    @classmethod
    def build(cls, train_id, station_num, seat_num, stations, prices, start_time,
              travel_times, stop_over_times, sale_date, train_type):
        """Build a train from the ``|``-separated fields of an add_train command."""
        if not 2 <= station_num <= MAX_STATIONS:
            raise ValueError(f"station count {station_num} outside 2..{MAX_STATIONS}")
        names = _split(stations)
        if len(names) != station_num:
            raise ValueError(f"expected {station_num} stations, got {len(names)}")
        price_list = [parse_int(p) for p in _split(prices)]
        if len(price_list) != station_num - 1:
            raise ValueError(f"expected {station_num - 1} prices, got {len(price_list)}")
        travel = [parse_int(t) for t in _split(travel_times)]
        if len(travel) < station_num - 1:
            raise ValueError(f"expected {station_num - 1} travel times, got {len(travel)}")
        stops = [parse_int(s) for s in _split(stop_over_times)] if station_num > 2 else []
        if len(stops) < station_num - 2:
            raise ValueError(f"expected {station_num - 2} stop-over times, got {len(stops)}")
        dates = _split(sale_date)
        if len(dates) < 2:
            raise ValueError(f"sale date needs two days: {sale_date!r}")
        if not train_type:
            raise ValueError("train type is empty")

        start = TimeType.from_string("06-01 " + start_time)
        arriving = [TimeType(0)]
        leaving = [start]
        for ride, stop in zip(travel[: station_num - 2], stops):
            arrival = leaving[-1] + ride
            arriving.append(arrival)
            leaving.append(arrival + stop)
        arriving.append(leaving[-1] + travel[station_num - 2])
        leaving.append(TimeType(MAX_INT))

        return cls(
            train_id=train_id,
            station_num=station_num,
            seat_num=seat_num,
            stations=names,
            price_sums=list(accumulate(price_list, initial=0)),
            start_time=start,
            arriving_times=arriving,
            leaving_times=leaving,
            start_sale_date=TimeType.from_string(dates[0] + " 00:00"),
            end_sale_date=TimeType.from_string(dates[1] + " 00:00"),
            train_type=train_type[0],
        )

    def __lt__(self, other):
        if not isinstance(other, Train):
            return NotImplemented
        return self.train_id < other.train_id


@dataclass
class DayTrain:
    """Seats left on one day's run; ``seats[i - 1]`` covers the leg leaving station ``i``."""

    seats: list = field(default_factory=list)

    def _check(self, left, right):
        if left < 1 or right > len(self.seats):
            raise IndexOutOfBound(f"stations {left}..{right} outside 1..{len(self.seats)}")

    def query_seat(self, left, right):
        """The fewest seats left over stations ``left..right`` inclusive."""
        if left > right:
            return MAX_INT
        self._check(left, right)
        return min(self.seats[left - 1:right])

    def modify_seat(self, left, right, delta):
        """Add ``delta`` to the seats over stations ``left..right`` inclusive."""
        if left > right:
            return
        self._check(left, right)
        for i in range(left - 1, right):
            self.seats[i] += delta


@dataclass
class Station:
    """One stop of a released train, with its times relative to the first departure."""

    train_id: str
    station_name: str
    price_sum: int
    start_sale_time: TimeType
    end_sale_time: TimeType
    arriving_time: TimeType
    leaving_time: TimeType
    index: int


@dataclass
class Ticket:
    """A ride on one train from ``source`` to ``target``."""

    source: Station
    target: Station

    def cost(self):
        return self.target.price_sum - self.source.price_sum

    def time(self):
        """Minutes from departure at the source to arrival at the target."""
        return self.target.arriving_time - self.source.leaving_time


class Status(Enum):
    SUCCESS = 0
    PENDING = 1
    REFUNDED = 2


@dataclass
class Order:
    """A purchase of ``num`` tickets at ``price`` each."""

    user_name: str
    train_id: str
    num: int
    price: int
    order_id: int
    start_day: TimeType
    leaving_time: TimeType
    arriving_time: TimeType
    status: Status
    from_index: int
    to_index: int
    from_station: str
    to_station: str


@dataclass
class PendingOrder:
    """An order waiting for seats to become free."""

    train_id: str
    user_name: str
    start_day: TimeType
    num: int
    from_index: int
    to_index: int
    order_id: int