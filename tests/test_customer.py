import copy
import logging

from pharmadesk.address import Address
from pharmadesk.customer import Customer


def test_default_customer():
    c = Customer()
    assert c.name == "No name"
    assert c.address == Address()


def test_ids_are_sequential():
    a = Customer("Ann")
    b = Customer("Bob")
    assert b.id == a.id + 1
    assert a.id >= 1


def test_blank_name_falls_back(caplog):
    with caplog.at_level(logging.WARNING):
        c = Customer(" ")
    assert c.name == "No name"
    assert "Invalid customer name" in caplog.text


def test_name_and_address_kept():
    addr = Address("ann@example.com", "Amman", "0700", "Main")
    c = Customer("Ann", addr)
    assert c.name == "Ann"
    assert c.address == addr


def test_copy_keeps_id():
    c = Customer("Ann")
    dup = copy.copy(c)
    assert dup.id == c.id
    assert dup.name == "Ann"


def test_render():
    addr = Address("ann@example.com", "Amman", "0700", "Main")
    c = Customer("Ann", addr)
    text = c.render()
    assert text.startswith(f"Customer Name : Ann\nCustomer ID : {c.id}\nAddress : \n")
    assert text.endswith(addr.render())