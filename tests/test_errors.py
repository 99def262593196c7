import pytest

from railledger.errors import (
    ContainerError,
    ContainerIsEmpty,
    IndexOutOfBound,
    InvalidIterator,
)


@pytest.mark.parametrize("cls", [IndexOutOfBound, InvalidIterator, ContainerIsEmpty])
def test_subclasses_are_container_errors(cls):
    err = cls("x")
    assert isinstance(err, ContainerError)
    assert str(err) == " x"
    assert err.detail == "x"


def test_message_joins_variant_and_detail():
    assert str(ContainerError("boom")) == " boom"


def test_default_detail_is_empty():
    err = InvalidIterator()
    assert err.detail == ""
    assert str(err) == " "


def test_index_out_of_bound_is_index_error():
    err = IndexOutOfBound("position 4")
    assert isinstance(err, IndexError)
    assert err.detail == "position 4"
    assert str(err) == " position 4"


def test_detail_is_kept():
    err = ContainerIsEmpty("nothing here")
    assert err.detail == "nothing here"
    assert str(err) == " nothing here"