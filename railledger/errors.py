"""Exceptions raised by the containers in this package."""


class ContainerError(Exception):
    """Base error for container misuse; carries an optional detail text."""

    variant = ""

    def __init__(self, detail=""):
        super().__init__(detail)
        self.detail = detail

    def __str__(self):
        return f"{self.variant} {self.detail}"


class IndexOutOfBound(ContainerError, IndexError):
    """A position or key lies outside the container."""


class InvalidIterator(ContainerError):
    """A cursor was moved or dereferenced where that is not allowed."""


class ContainerIsEmpty(ContainerError):
    """An element was requested from an empty container."""