"""Interactive menu for managing pharmacies in a community."""

from __future__ import annotations

import argparse
import re
import sys
from typing import List, Optional, TextIO

from .address import Address
from .customer import Customer
from .dates import Date
from .medication import Medication, OffTheShelf, Prescription
from .pharmacy import Pharmacy

MENU = (
    "\nWelcome to our community!\n\n"
    "- Enter 1 to add a new pharmacy\n"
    "- Enter 2 to add a new medication to pharmacy\n"
    "- Enter 3 to remove medication from pharmacy\n"
    "- Enter 4 to add a new customer to pharmacy\n"
    "- Enter 5 to list medications in pharmacy\n"
    "- Enter 6 to list customers in pharmacy\n"
    "- Enter 7 to list pharmacies\n\n"
)
TYPE_PROMPT = "- 1 for Medication\n- 2 for Off The Shelf\n- 3 for Prescription\n"

_WORD_PATTERN = re.compile(r"\S+")


class _Reader:
    """Whitespace-separated word and line reader over a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _fill(self) -> None:
        line = self._stream.readline()
        if not line:
            raise EOFError
        self._pending = line

    def word(self) -> str:
        while not self._pending.strip():
            self._fill()
        stripped = self._pending.lstrip()
        match = _WORD_PATTERN.match(stripped)
        assert match is not None
        self._pending = stripped[match.end():]
        return match.group()

    def char(self) -> str:
        first_word = self.word()
        self._pending = first_word[1:] + self._pending
        return first_word[0]

    def integer(self) -> int:
        return int(self.word())

    def number(self) -> float:
        return float(self.word())

    def flag(self) -> bool:
        value = self.integer()
        if value not in (0, 1):
            raise ValueError(f"expected 0 or 1, got {value}")
        return bool(value)

    def ignore(self) -> None:
        if not self._pending:
            self._fill()
        self._pending = self._pending[1:]

    def line(self) -> str:
        if not self._pending:
            self._fill()
        text, _, rest = self._pending.partition("\n")
        self._pending = rest
        return text.rstrip("\r")


class Session:
    """One interactive session over the given input and output streams."""

    def __init__(self, input_stream: TextIO, output_stream: TextIO) -> None:
        self._in = _Reader(input_stream)
        self._out = output_stream
        self.pharmacies: List[Pharmacy] = []
        self.pharmacy_count = 0

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _clear(self) -> None:
        isatty = getattr(self._out, "isatty", None)
        if isatty is not None and isatty():
            self._write("\033[2J\033[H")

    def _select(self) -> Optional[Pharmacy]:
        self._write("Enter pharmacy id:\n")
        index = self._in.integer()
        if not 0 <= index < self.pharmacy_count:
            self._write("Invalid pharmacy id\n")
            return None
        return self.pharmacies[index]

    def _date(self) -> Date:
        day, month, year = (self._in.integer() for _ in range(3))
        return Date(day, month, year)

    def resize(self) -> int:
        """Ask for a new maximum number of pharmacies and apply it."""
        self._write("What do you want the max amount of pharmacies to be?\n")
        size = self._in.integer()
        keep = max(0, min(size, self.pharmacy_count))
        self.pharmacies = self.pharmacies[:keep] + [
            Pharmacy() for _ in range(max(size, 0) - keep)
        ]
        self.pharmacy_count = keep
        return size

    def add_pharmacy(self) -> None:
        if self.pharmacy_count >= len(self.pharmacies):
            self._write(
                "The maximum number of pharmacies has been reached. Do you want to "
                "increase the max number of pharmacies? (Enter Y or N)\n"
            )
            if self._in.char() not in ("Y", "y"):
                return
            self.resize()
            if self.pharmacy_count >= len(self.pharmacies):
                return
        self._write("Enter pharmacy name:\n")
        name = self._in.word()
        self.pharmacies[self.pharmacy_count].name = name
        self.pharmacy_count += 1

    def add_medication(self) -> None:
        pharmacy = self._select()
        if pharmacy is None:
            return
        self._write("Please enter the type of medicine:\n" + TYPE_PROMPT)
        kind = self._in.integer()
        self._write("Please enter Medicine Name\n")
        name = self._in.word()
        self._write("Please enter Medicine Expiry day, month, year\n")
        day, month, year = (self._in.integer() for _ in range(3))
        self._write("Please enter Medicine Description\n")
        self._in.ignore()
        description = self._in.line()
        self._write("Please enter Medicine  Barcode\n")
        barcode = self._in.word()
        self._write("Please enter Medicine Price\n")
        price = self._in.number()
        self._write("Please enter Medicine Quantity\n")
        quantity = self._in.integer()
        expiry = Date(day, month, year)
        if kind == 1:
            pharmacy.add_medication(
                Medication(name, description, expiry, barcode, price, quantity)
            )
        elif kind == 2:
            self._write(
                "Please enter if it has a BOGOF (Buy One Get One Free) offer (enter 1 or 0)\n"
            )
            bogof = self._in.flag()
            pharmacy.add_off_the_shelf(
                OffTheShelf(bogof, name, description, expiry, barcode, price, quantity)
            )
        elif kind == 3:
            self._write("Please enter FDA Number\n")
            fda_number = self._in.integer()
            self._write("Please enter Approval day, month, year\n")
            self._date()
            # The approval date is taken from the expiry fields.
            approval = Date(day, month, year)
            pharmacy.add_prescription(
                Prescription(
                    fda_number, approval, name, description, expiry, barcode, price, quantity
                )
            )

    def remove_medication(self) -> None:
        pharmacy = self._select()
        if pharmacy is None:
            return
        self._write("Remove by name (0) or index (1). Enter the option\n")
        option = self._in.integer()
        if option == 0:
            self._write("Enter name of medication:\n")
            name = self._in.word()
            self._write("Enter type of medication:\n" + TYPE_PROMPT + "\n")
            pharmacy.remove_named(name, self._in.integer())
        elif option == 1:
            self._write("Enter index of medication:\n")
            index = self._in.integer()
            self._write("Enter type of medication:\n" + TYPE_PROMPT + "\n")
            pharmacy.remove_at(index, self._in.integer())

    def add_customer(self) -> None:
        pharmacy = self._select()
        if pharmacy is None:
            return
        self._write("Please enter Customer Name\n")
        name = self._in.word()
        self._write("Please enter Customer Phone Number\n")
        phone = self._in.word()
        self._write("Please enter Customer Email\n")
        email = self._in.word()
        self._write("Please enter Customer City\n")
        city = self._in.word()
        self._write("Please enter Customer Street\n")
        self._in.ignore()
        street = self._in.line()
        pharmacy.add_customer(Customer(name, Address(email, city, phone, street)))

    def print_medications(self) -> None:
        pharmacy = self._select()
        if pharmacy is not None:
            self._write(pharmacy.available_medications())

    def print_customers(self) -> None:
        pharmacy = self._select()
        if pharmacy is not None:
            self._write(pharmacy.customers_report())

    def print_pharmacies(self) -> None:
        if self.pharmacy_count == 0:
            self._write("No pharmacies in town!\n")
            return
        for pharmacy in self.pharmacies[: self.pharmacy_count]:
            self._write(pharmacy.render())

    def run(self) -> None:
        """Run the menu loop until the user enters -1 or input ends."""
        actions = {
            1: self.add_pharmacy,
            2: self.add_medication,
            3: self.remove_medication,
            4: self.add_customer,
            5: self.print_medications,
            6: self.print_customers,
            7: self.print_pharmacies,
        }
        self._write("Welcome to our community!\n")
        try:
            self.resize()
            self._clear()
            while True:
                self._write(MENU)
                try:
                    choice = self._in.integer()
                except ValueError:
                    choice = None
                self._clear()
                if choice == -1:
                    self._write("Thanks for visiting our Pharmacy, see you next time!")
                    return
                action = actions.get(choice) if choice is not None else None
                if action is None:
                    self._write("Wrong input! Please try again")
                    continue
                try:
                    action()
                except ValueError:
                    self._write("Wrong input! Please try again")
        except EOFError:
            return


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pharmadesk", description="Manage the pharmacies of a community."
    )
    parser.parse_args(argv)
    Session(sys.stdin, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())