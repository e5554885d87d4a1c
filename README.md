# pharmadesk

A small menu-driven console for keeping track of the pharmacies in town: their
stock of medications (plain, off-the-shelf and prescription), and their
customers.

## Installing

    pip install .

## Running

    pharmadesk

The command takes no options besides `--help`. You are first asked how many
pharmacies the session may hold at most. After that, a menu repeats until you
enter `-1` or the input ends:

| Choice | Action                                   |
|--------|------------------------------------------|
| 1      | add a new pharmacy                       |
| 2      | add a medication to a pharmacy           |
| 3      | remove a medication from a pharmacy      |
| 4      | add a customer to a pharmacy             |
| 5      | list the medications of a pharmacy       |
| 6      | list the customers of a pharmacy         |
| 7      | list all pharmacies                      |
| -1     | leave                                    |

Pharmacies are chosen by their position in the order they were added,
counting from 0. Medications are one of three kinds: 1 for a plain medication,
2 for an off-the-shelf item (which may carry a buy-one-get-one-free offer),
3 for a prescription medication with an FDA number and an approval date. For a
prescription the approval date is asked for, but the expiry date entered
before it is the one recorded. Items can be removed by name or by their
position within their kind.

When the maximum number of pharmacies has been reached, adding another one
offers to raise the limit. A choice that is not on the menu, or a value that
cannot be read as a number, prints `Wrong input! Please try again`. When the
output is a terminal, the screen is cleared between steps.

## Using it as a library

    from pharmadesk.dates import Date
    from pharmadesk.address import Address
    from pharmadesk.customer import Customer
    from pharmadesk.medication import Medication, OffTheShelf, Prescription
    from pharmadesk.pharmacy import Pharmacy, MedicationKind

    shop = Pharmacy("Central")
    shop.add_medication(
        Medication("Aspirin", "Pain relief", Date(1, 6, 2026), "123456789012", 2.5, 40)
    )
    shop.add_customer(
        Customer("Lina", Address("lina@example.com", "Amman", "+962xxxxxxxxx", "Main St"))
    )
    print(shop.total_cash())            # 100.0
    print(shop.available_medications())
    shop.remove_named("Aspirin", MedicationKind.MEDICATION)

`Pharmacy` also offers `add_off_the_shelf`, `add_prescription`, `remove_at`,
`customers_report` and `render`, and the read-only views `medications`,
`off_the_shelf`, `prescriptions` and `customers`. The model classes each have
a `render()` method returning their printable text, and `Date` prints as
`day-month-year`. `offer_end_date(bogof, today)` in `pharmadesk.medication`
gives the end of an off-the-shelf offer: three months on for a
buy-one-get-one-free offer, two years on otherwise.

Invalid values are replaced by defaults rather than raising, and a warning is
sent through the `logging` module: a `Date` day outside 1–31, month outside
1–12 or year before 2000; an empty medication name or description, a negative
price or quantity, or a barcode that is not 12 characters long when assigned
to a medication; a negative FDA number; a blank (`" "`) customer name, e-mail
or city. Values passed to the `Medication` constructor are stored as given;
only later assignments are checked.

The interactive session can also be driven from any text streams through
`pharmadesk.cli.Session`, which is how the tests exercise it.

## What it does not do

Everything lives in memory for the length of one session. Nothing is saved
to or loaded from disk, so pharmacies, stock and customers are gone once the
program ends.