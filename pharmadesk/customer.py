"""Pharmacy customers."""

from __future__ import annotations

import itertools
import logging

from .address import Address

logger = logging.getLogger(__name__)

DEFAULT_NAME = "No name"


class Customer:
    """A named customer with an address and a unique, sequential id."""

    _ids = itertools.count(1)

    def __init__(self, name: str = DEFAULT_NAME, address: Address | None = None) -> None:
        self._id = next(Customer._ids)
        self.name = name
        self.address = address if address is not None else Address()

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if value == " ":
            self._name = DEFAULT_NAME
            logger.warning("Invalid customer name, set to default.")
        else:
            self._name = value

    def __repr__(self) -> str:
        return f"Customer(id={self.id}, name={self.name!r}, address={self.address!r})"

    def render(self) -> str:
        """Return the printable block describing this customer."""
        return (
            f"Customer Name : {self.name}\n"
            f"Customer ID : {self.id}\n"
            "Address : \n"
            + self.address.render()
        )