import dataclasses

import pytest

from railledger.errors import IndexOutOfBound
from railledger.records import (
    MAX_INT,
    DayTrain,
    Order,
    Station,
    Status,
    Ticket,
    Train,
    User,
)
from railledger.timetype import TimeType

PRICES = [10, 20]
TRAVEL = [60, 90]
STOP = 5


def make_train(train_id="T1"):
    return Train.build(
        train_id, 3, 100, "A|B|C", "10|20", "08:00", "60|90", "5", "06-01|06-03", "G"
    )


def station_of(train, i):
    return Station(
        train.train_id,
        train.stations[i - 1],
        train.price_sums[i - 1],
        train.start_sale_date,
        train.end_sale_date,
        train.arriving_times[i - 1],
        train.leaving_times[i - 1],
        i,
    )


def test_user_ordering_by_name():
    password = "password"
    bob = User("bob", "Bob", "bob@example.com", password=password, privilege=3)
    amy = User("amy", "Amy", "amy@example.com", password=password, privilege=7)
    assert amy < bob
    assert sorted([bob, amy]) == [amy, bob]


def test_train_build_fields():
    train = make_train()
    assert train.stations == ["A", "B", "C"]
    assert train.train_type == "G"
    assert train.is_released is False
    assert train.price_sums[0] == 0
    assert [b - a for a, b in zip(train.price_sums, train.price_sums[1:])] == PRICES
    assert train.start_sale_date == TimeType.from_string("06-01 00:00")
    assert train.end_sale_date == TimeType.from_string("06-03 00:00")


def test_train_build_times():
    train = make_train()
    assert train.arriving_times[0] == TimeType(0)
    assert train.leaving_times[0] == TimeType.from_string("06-01 08:00")
    assert train.arriving_times[1] - train.leaving_times[0] == TRAVEL[0]
    assert train.leaving_times[1] - train.arriving_times[1] == STOP
    assert train.arriving_times[2] - train.leaving_times[1] == TRAVEL[1]
    assert train.leaving_times[2] == TimeType(MAX_INT)


def test_train_with_two_stations():
    train = Train.build("T2", 2, 50, "X|Y", "7", "23:00", "120", "_", "07-01|07-02", "D")
    assert train.arriving_times[1] - train.leaving_times[0] == 120
    assert train.price_sums[-1] == 7
    assert len(train.leaving_times) == 2


def test_train_build_rejects_bad_input():
    with pytest.raises(ValueError):
        Train.build("T3", 1, 50, "X", "", "08:00", "", "_", "06-01|06-02", "G")
    with pytest.raises(ValueError):
        Train.build("T3", 3, 50, "X|Y", "1|2", "08:00", "1|2", "3", "06-01|06-02", "G")


def test_train_ordering():
    assert make_train("A1") < make_train("B1")
    assert not make_train("B1") < make_train("A1")


def test_daytrain_query_and_modify():
    day = DayTrain([100, 100, 100])
    day.modify_seat(1, 2, -30)
    assert day.seats[:2] == [70, 70]
    assert day.query_seat(1, 3) == 70
    assert day.query_seat(3, 3) == 100
    assert day.query_seat(2, 1) == MAX_INT


def test_daytrain_out_of_range():
    day = DayTrain([5, 5])
    with pytest.raises(IndexOutOfBound):
        day.query_seat(1, 3)
    with pytest.raises(IndexOutOfBound):
        day.modify_seat(0, 1, 1)


def test_ticket_cost_and_time():
    train = make_train()
    ticket = Ticket(station_of(train, 1), station_of(train, 3))
    assert ticket.cost() == sum(PRICES)
    assert ticket.time() == sum(TRAVEL) + STOP
    short = Ticket(station_of(train, 2), station_of(train, 3))
    assert short.cost() == PRICES[1]
    assert short.time() == TRAVEL[1]


def test_order_status_change():
    order = Order(
        "amy", "T1", 2, 30, 1, TimeType(0), TimeType(480), TimeType(635),
        Status.SUCCESS, 1, 3, "A", "C",
    )
    refunded = dataclasses.replace(order, status=Status.REFUNDED)
    assert refunded.status is Status.REFUNDED
    assert refunded.order_id == order.order_id
    assert order.status is Status.SUCCESS