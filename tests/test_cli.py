import io

import pytest

from pharmadesk.cli import Session, main
from pharmadesk.dates import Date
from pharmadesk.medication import OffTheShelf, Prescription


def _run(text):
    out = io.StringIO()
    session = Session(io.StringIO(text), out)
    session.run()
    return session, out.getvalue()


def test_exit_message():
    session, out = _run("2\n-1\n")
    assert out.startswith("Welcome to our community!\n")
    assert out.endswith("Thanks for visiting our Pharmacy, see you next time!")
    assert len(session.pharmacies) == 2


def test_add_and_list_pharmacy():
    session, out = _run("2\n1\nAlpha\n7\n-1\n")
    assert session.pharmacy_count == 1
    assert session.pharmacies[0].name == "Alpha"
    assert "Pharmacy Name: Alpha\n" in out


def test_no_pharmacies_message():
    _, out = _run("1\n7\n-1\n")
    assert "No pharmacies in town!" in out


def test_wrong_choice():
    _, out = _run("1\n42\n-1\n")
    assert "Wrong input! Please try again" in out


def test_invalid_pharmacy_id():
    _, out = _run("1\n5\n3\n-1\n")
    assert "Invalid pharmacy id" in out


def test_full_capacity_declined():
    session, _ = _run("1\n1\nA\n1\nN\n-1\n")
    assert session.pharmacy_count == 1
    assert len(session.pharmacies) == 1


def test_full_capacity_resized():
    session, _ = _run("1\n1\nA\n1\nY\n3\nB\n-1\n")
    assert [p.name for p in session.pharmacies[: session.pharmacy_count]] == ["A", "B"]
    assert len(session.pharmacies) == 3


def test_add_plain_medication_and_list():
    text = (
        "1\n1\nShop\n"
        "2\n0\n1\nAspirin\n1 2 2030\nPain relief tablets\n123456789012\n2.5\n10\n"
        "5\n0\n-1\n"
    )
    session, out = _run(text)
    med = session.pharmacies[0].medications[0]
    assert med.name == "Aspirin"
    assert med.description == "Pain relief tablets"
    assert med.exp_date == Date(1, 2, 2030)
    assert med.quantity == 10
    assert med.render() in out


def test_add_off_the_shelf():
    text = (
        "1\n1\nShop\n"
        "2\n0\n2\nGel\n3 4 2031\nCooling gel\n123456789012\n1\n5\n1\n-1\n"
    )
    session, _ = _run(text)
    item = session.pharmacies[0].off_the_shelf[0]
    assert isinstance(item, OffTheShelf)
    assert item.bogof is True


def test_prescription_approval_uses_expiry_fields():
    text = (
        "1\n1\nShop\n"
        "2\n0\n3\nPill\n5 6 2032\nStrong\n123456789012\n9\n2\n77\n1 1 2020\n-1\n"
    )
    session, _ = _run(text)
    item = session.pharmacies[0].prescriptions[0]
    assert isinstance(item, Prescription)
    assert item.fda_number == 77
    assert item.approval_date == Date(5, 6, 2032)


def test_remove_by_name():
    text = (
        "1\n1\nShop\n"
        "2\n0\n1\nAspirin\n1 2 2030\nx\n123456789012\n1\n1\n"
        "3\n0\n0\nAspirin\n1\n-1\n"
    )
    session, _ = _run(text)
    assert session.pharmacies[0].medications == ()


def test_remove_by_index():
    text = (
        "1\n1\nShop\n"
        "2\n0\n1\nAspirin\n1 2 2030\nx\n123456789012\n1\n1\n"
        "3\n0\n1\n0\n1\n-1\n"
    )
    session, _ = _run(text)
    assert session.pharmacies[0].medications == ()


def test_add_customer_and_list():
    text = (
        "1\n1\nShop\n"
        "4\n0\nAnn\n0790000000\nann@example.com\nAmman\nMain Street 5\n"
        "6\n0\n-1\n"
    )
    session, out = _run(text)
    customer = session.pharmacies[0].customers[0]
    assert customer.name == "Ann"
    assert customer.address.street == "Main Street 5"
    assert customer.address.email == "ann@example.com"
    assert "Customer Name : Ann\n" in out


def test_bad_number_in_action_reports_wrong_input():
    _, out = _run("1\n1\nShop\n2\nabc\n-1\n")
    assert "Wrong input! Please try again" in out


def test_end_of_input_stops_loop():
    session, out = _run("1\n1\nShop\n")
    assert session.pharmacy_count == 1
    assert "Thanks for visiting" not in out


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])