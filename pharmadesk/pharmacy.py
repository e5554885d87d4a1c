"""A pharmacy holding medications, off-the-shelf items, prescriptions and customers."""

from __future__ import annotations

import enum
import itertools
import logging
from typing import Callable, List, Union

from .customer import Customer
from .medication import Medication, OffTheShelf, Prescription

logger = logging.getLogger(__name__)

DEFAULT_NAME = "No Name"


class MedicationKind(enum.IntEnum):
    """The three stock lists a pharmacy keeps, numbered as the menu shows them."""

    MEDICATION = 1
    OFF_THE_SHELF = 2
    PRESCRIPTION = 3


_BLANKS: dict[MedicationKind, Callable[[], Medication]] = {
    MedicationKind.MEDICATION: Medication,
    MedicationKind.OFF_THE_SHELF: OffTheShelf,
    MedicationKind.PRESCRIPTION: Prescription,
}


class Pharmacy:
    """A named pharmacy with a sequential id and its stock and customers."""

    _ids = itertools.count()

    def __init__(self, name: str = DEFAULT_NAME) -> None:
        self._id = next(Pharmacy._ids)
        if name == "":
            logger.warning("Invalid pharmacy name entered, set to default.")
        self.name = name
        self._stock: dict[MedicationKind, List[Medication]] = {
            kind: [] for kind in MedicationKind
        }
        self._customers: List[Customer] = []

    @property
    def id(self) -> int:
        return self._id

    @id.setter
    def id(self, value: int) -> None:
        self._id = value if value >= 0 else 0

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value if value != "" else DEFAULT_NAME

    @property
    def medications(self) -> tuple[Medication, ...]:
        return tuple(self._stock[MedicationKind.MEDICATION])

    @property
    def off_the_shelf(self) -> tuple[OffTheShelf, ...]:
        return tuple(self._stock[MedicationKind.OFF_THE_SHELF])  # type: ignore[arg-type]

    @property
    def prescriptions(self) -> tuple[Prescription, ...]:
        return tuple(self._stock[MedicationKind.PRESCRIPTION])  # type: ignore[arg-type]

    @property
    def customers(self) -> tuple[Customer, ...]:
        return tuple(self._customers)

    def add_medication(self, item: Medication) -> None:
        self._stock[MedicationKind.MEDICATION].append(item)

    def add_off_the_shelf(self, item: OffTheShelf) -> None:
        self._stock[MedicationKind.OFF_THE_SHELF].append(item)

    def add_prescription(self, item: Prescription) -> None:
        self._stock[MedicationKind.PRESCRIPTION].append(item)

    def add_customer(self, customer: Customer) -> None:
        """Add a customer.

        The customer is placed at the position given by the number of plain
        medications; if that position is already taken, the old customer
        there is replaced and a blank customer fills the new slot.
        """
        slot = len(self._stock[MedicationKind.MEDICATION])
        if slot < len(self._customers):
            self._customers.append(Customer())
            self._customers[slot] = customer
        else:
            self._customers.append(customer)

    @staticmethod
    def _kind(kind: Union[int, MedicationKind]) -> MedicationKind | None:
        try:
            return MedicationKind(kind)
        except ValueError:
            return None

    def _remove(self, kind: MedicationKind, index: int) -> None:
        items = self._stock[kind]
        following = len(items) - index - 1
        if following >= 2:
            # The removed slot and the one after it are both left blank and
            # the last item is dropped.
            blank = _BLANKS[kind]
            items[index] = blank()
            items[index + 1] = blank()
            items.pop()
        else:
            del items[index]

    def remove_at(self, index: int, kind: Union[int, MedicationKind]) -> None:
        """Remove the item at ``index`` of the given list; bad input is ignored."""
        resolved = self._kind(kind)
        if resolved is None:
            return
        if not 0 <= index < len(self._stock[resolved]):
            return
        self._remove(resolved, index)

    def remove_named(self, name: str, kind: Union[int, MedicationKind]) -> None:
        """Remove the first item called ``name`` from the given list, if any."""
        resolved = self._kind(kind)
        if resolved is None:
            return
        index = next(
            (i for i, item in enumerate(self._stock[resolved]) if item.name == name),
            None,
        )
        if index is None:
            return
        self._remove(resolved, index)

    def available_medications(self) -> str:
        """Return the listing of every item in stock, list by list."""
        parts = [f"The available medications of pharmacy no. {self.id} are the following : \n"]
        for kind in MedicationKind:
            for index, item in enumerate(self._stock[kind]):
                parts.append(f"Index: {index}\n")
                parts.append(item.render())
        return "".join(parts)

    def customers_report(self) -> str:
        """Return the listing of every customer."""
        header = f"Customers for Pharmacy no. {self.id} are : \n"
        return header + "".join(customer.render() for customer in self._customers)

    def total_cash(self) -> float:
        """Return the value of all stock: price times quantity, summed."""
        return sum(
            item.price * item.quantity
            for items in self._stock.values()
            for item in items
        )

    def render(self) -> str:
        """Return the summary block of this pharmacy."""
        med_count = len(self._stock[MedicationKind.MEDICATION])
        # Every stock line reports the plain-medication count.
        return (
            f"Pharmacy ID: {self.id}\n"
            f"Pharmacy Name: {self.name}\n"
            f"Number of medications: {med_count}\n"
            f"Number of off the shelf medications: {med_count}\n"
            f"Number of prescriptions: {med_count}\n"
            f"Number of customers: {len(self._customers)}\n"
        )

    def __repr__(self) -> str:
        return f"Pharmacy(id={self.id}, name={self.name!r})"