"""Customer contact address."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

DEFAULT_EMAIL = "[email]"
DEFAULT_CITY = "unknown"
DEFAULT_MOBILE = "+962xxxxxxxxx"
DEFAULT_STREET = "unknown"


class Address:
    """E-mail, city, mobile number and street of a customer."""

    def __init__(
        self,
        email: str = DEFAULT_EMAIL,
        city: str = DEFAULT_CITY,
        mobile: str = DEFAULT_MOBILE,
        street: str = DEFAULT_STREET,
    ) -> None:
        self.email = email
        self.city = city
        self.mobile = mobile
        self.street = street

    @property
    def email(self) -> str:
        return self._email

    @email.setter
    def email(self, value: str) -> None:
        if value == " ":
            self._email = DEFAULT_EMAIL
            logger.warning("Invalid customer email, set to default.")
        else:
            self._email = value

    @property
    def city(self) -> str:
        return self._city

    @city.setter
    def city(self, value: str) -> None:
        if value == " ":
            self._city = DEFAULT_CITY
            logger.warning("Invalid customer city, set to default.")
        else:
            self._city = value

    @property
    def mobile(self) -> str:
        return self._mobile

    @mobile.setter
    def mobile(self, value: str) -> None:
        # A warning is emitted, yet the given value is still stored.
        if value == "":
            logger.warning("Invalid customer mobile no, set to default.")
        self._mobile = value

    @property
    def street(self) -> str:
        return self._street

    @street.setter
    def street(self, value: str) -> None:
        # A warning is emitted, yet the given value is still stored.
        if value == " ":
            logger.warning("Invalid customer street name, set to default.")
        self._street = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return (self.email, self.city, self.mobile, self.street) == (
            other.email,
            other.city,
            other.mobile,
            other.street,
        )

    def __repr__(self) -> str:
        return (
            f"Address(email={self.email!r}, city={self.city!r}, "
            f"mobile={self.mobile!r}, street={self.street!r})"
        )

    def render(self) -> str:
        """Return the printable block describing this address."""
        return (
            f"Email: {self.email}\n"
            f"City:{self.city}\n"
            f"MobileNO:{self.mobile}\n"
            f"StreetName:{self.street}\n"
        )