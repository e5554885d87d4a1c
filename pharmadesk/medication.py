"""Medications: plain, off-the-shelf and prescription."""

from __future__ import annotations

import copy
import datetime
import itertools
import logging

from .dates import Date

logger = logging.getLogger(__name__)

DEFAULT_NAME = "No Name"
DEFAULT_DESCRIPTION = "No description"
DEFAULT_BARCODE = "000000000000"
BARCODE_LENGTH = 12


def _default_date() -> Date:
    return Date(1, 1, 2023)


def _format_price(price: float) -> str:
    return format(price, "g")


def offer_end_date(bogof: bool, today: datetime.date | None = None) -> Date:
    """Return when an offer ends: three months away for BOGOF, else two years."""
    if today is None:
        today = datetime.date.today()
    day, month, year = today.day, today.month, today.year
    if bogof:
        month += 3
        if month > 12:
            month -= 12
            year += 1
        return Date(day, month, year)
    return Date(day, month, year + 2)


class Medication:
    """A stocked medication with a sequential id shared by all kinds."""

    _ids = itertools.count()

    def __init__(
        self,
        name: str = DEFAULT_NAME,
        description: str = DEFAULT_DESCRIPTION,
        exp_date: Date | None = None,
        barcode: str = DEFAULT_BARCODE,
        price: float = 0.0,
        quantity: int = 0,
    ) -> None:
        self._id = next(Medication._ids)
        # Values given at construction are stored unchecked; assignments are validated.
        self._name = name
        self._description = description
        self._exp_date = copy.copy(exp_date) if exp_date is not None else _default_date()
        self._barcode = barcode
        self._price = float(price)
        self._quantity = int(quantity)

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if value != "":
            self._name = value
        else:
            self._name = DEFAULT_NAME
            logger.warning("Invalid medication name, set to default")

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        if value != "":
            self._description = value
        else:
            self._description = DEFAULT_DESCRIPTION
            logger.warning("Invalid medication description, set to default")

    @property
    def exp_date(self) -> Date:
        return self._exp_date

    @exp_date.setter
    def exp_date(self, value: Date) -> None:
        self._exp_date = copy.copy(value)

    @property
    def price(self) -> float:
        return self._price

    @price.setter
    def price(self, value: float) -> None:
        if value >= 0:
            self._price = float(value)
        else:
            self._price = 0.0
            logger.warning("Invalid medication price, set to default")

    @property
    def quantity(self) -> int:
        return self._quantity

    @quantity.setter
    def quantity(self, value: int) -> None:
        if value >= 0:
            self._quantity = int(value)
        else:
            self._quantity = 0
            logger.warning("Invalid medication quantity, set to default")

    @property
    def barcode(self) -> str:
        return self._barcode

    @barcode.setter
    def barcode(self, value: str) -> None:
        if len(value) == BARCODE_LENGTH:
            self._barcode = value
        else:
            self._barcode = DEFAULT_BARCODE
            logger.warning("Invalid medication barcode, set to default")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, name={self.name!r})"

    def render(self) -> str:
        """Return the printable block describing this medication."""
        return (
            f"Medication name: {self.name}\n"
            f"Description: {self.description}\n"
            f"Price: {_format_price(self.price)}\n"
            f"Quantity in stock: {self.quantity}\n"
            f"Expiry Date: {self.exp_date}\n"
            f"Barcode: {self.barcode}\n"
        )


class OffTheShelf(Medication):
    """A medication sold without prescription, possibly on a BOGOF offer."""

    def __init__(
        self,
        bogof: bool = False,
        name: str = DEFAULT_NAME,
        description: str = DEFAULT_DESCRIPTION,
        exp_date: Date | None = None,
        barcode: str = DEFAULT_BARCODE,
        price: float = 0.0,
        quantity: int = 0,
        today: datetime.date | None = None,
    ) -> None:
        super().__init__(name, description, exp_date, barcode, price, quantity)
        self.bogof = bool(bogof)
        self._offer_ends = offer_end_date(self.bogof, today)

    @property
    def offer_ends(self) -> Date:
        return self._offer_ends

    @offer_ends.setter
    def offer_ends(self, value: Date) -> None:
        self._offer_ends.day = value.day
        self._offer_ends.month = value.month
        self._offer_ends.year = value.year

    def render(self) -> str:
        """Return the printable block describing this item and its offer."""
        offer = "Yes BOGOF" if self.bogof else "No BOGOF"
        return super().render() + f"{offer}\nOfferEnds: \n{self.offer_ends}\n"


class Prescription(Medication):
    """A prescription medication with an FDA number and approval date."""

    def __init__(
        self,
        fda_number: int = 0,
        approval_date: Date | None = None,
        name: str = DEFAULT_NAME,
        description: str = DEFAULT_DESCRIPTION,
        exp_date: Date | None = None,
        barcode: str = DEFAULT_BARCODE,
        price: float = 0.0,
        quantity: int = 0,
    ) -> None:
        super().__init__(name, description, exp_date, barcode, price, quantity)
        self._approval_date = (
            copy.copy(approval_date) if approval_date is not None else _default_date()
        )
        self.fda_number = fda_number

    @property
    def fda_number(self) -> int:
        return self._fda_number

    @fda_number.setter
    def fda_number(self, value: int) -> None:
        if value < 0:
            self._fda_number = 0
            logger.warning("Invalid prescription FDA number entered, set to default.")
        else:
            self._fda_number = value

    @property
    def approval_date(self) -> Date:
        return self._approval_date

    @approval_date.setter
    def approval_date(self, value: Date) -> None:
        self._approval_date.day = value.day
        self._approval_date.month = value.month
        # The year is written into the day field, so the day always resets to 1
        # and the stored year is left unchanged.
        self._approval_date.day = value.year

    def render(self) -> str:
        """Return the printable block describing this prescription."""
        return (
            super().render()
            + f"FDANumber: {self.fda_number}\nApprovalDate: \n{self.approval_date}\n"
        )