"""Seeded Faker provider factory.

A fresh ``Faker`` instance is built for every top-level generation call and
seeded with ``seed_instance`` (never the class-wide ``Faker.seed``), so
concurrent or test-isolated calls never share random state.

Faker's core providers cover most names generators refer to. Two extra
namespaces are registered: ``commerce`` (product names, prices) and
``calendar`` (ISO dates drawn from fixed windows).
"""

from __future__ import annotations

import datetime as dt

from faker import Faker
from faker.providers import BaseProvider

__all__ = ["DEFAULT_LOCALE", "CalendarProvider", "CommerceProvider", "build_provider"]

DEFAULT_LOCALE = "en_US"

_PRODUCT_ADJECTIVES = (
    "Ergonomic", "Rustic", "Sleek", "Handcrafted", "Refined", "Practical",
    "Licensed", "Gorgeous", "Intelligent", "Small",
)
_PRODUCT_MATERIALS = (
    "Steel", "Wooden", "Concrete", "Plastic", "Cotton", "Granite", "Rubber",
    "Metal", "Soft", "Fresh",
)
_PRODUCT_NOUNS = (
    "Chair", "Car", "Computer", "Keyboard", "Mouse", "Bike", "Ball", "Gloves",
    "Pants", "Shirt", "Table", "Shoes", "Hat", "Towels", "Soap",
)


class CommerceProvider(BaseProvider):
    """Product names and prices, addressable as ``commerce.<method>``."""

    __provider__ = "commerce"

    def price(self, minimum: float = 1.0, maximum: float = 1000.0) -> str:
        """Price with two decimals, formatted as a plain string (e.g. ``"129.99"``)."""
        cents = self.random_int(int(minimum * 100), int(maximum * 100))
        return f"{cents / 100:.2f}"

    def product_name(self) -> str:
        return " ".join(
            (
                self.random_element(_PRODUCT_ADJECTIVES),
                self.random_element(_PRODUCT_MATERIALS),
                self.random_element(_PRODUCT_NOUNS),
            )
        )

    def product(self) -> str:
        return self.random_element(_PRODUCT_NOUNS)


# Fixed windows keep generated dates independent of the wall clock.
_ANY_WINDOW = (dt.datetime(2000, 1, 1), dt.datetime(2030, 12, 31, 23, 59, 59))
_PAST_WINDOW = (dt.datetime(2015, 1, 1), dt.datetime(2024, 12, 31, 23, 59, 59))
_BIRTH_WINDOW = (dt.datetime(1950, 1, 1), dt.datetime(2006, 12, 31))


class CalendarProvider(BaseProvider):
    """ISO 8601 dates and timestamps, addressable as ``calendar.<method>``.

    Faker's own date helpers anchor on the current time, so the same seed
    would give different values on different days. These draw from fixed
    windows instead.
    """

    __provider__ = "calendar"

    def _moment(self, window: tuple[dt.datetime, dt.datetime]) -> dt.datetime:
        start, end = window
        seconds = self.random_int(0, int((end - start).total_seconds()))
        return start + dt.timedelta(seconds=seconds)

    def date_time_iso(self) -> str:
        """UTC timestamp such as ``"2019-04-07T13:05:59Z"``."""
        return self._moment(_ANY_WINDOW).isoformat() + "Z"

    def past_date_time_iso(self) -> str:
        return self._moment(_PAST_WINDOW).isoformat() + "Z"

    def date_iso(self) -> str:
        return self._moment(_ANY_WINDOW).date().isoformat()

    def time_iso(self) -> str:
        return self._moment(_ANY_WINDOW).time().isoformat()

    def birth_date_iso(self) -> str:
        return self._moment(_BIRTH_WINDOW).date().isoformat()


def build_provider(seed: int | None = None, locale: str = DEFAULT_LOCALE) -> Faker:
    """Create an independent Faker instance with its own seeded ``random``.

    Args:
        seed:   Seed for ``seed_instance``. ``None`` seeds the instance
                from system entropy.
        locale: Faker locale, e.g. ``"en_US"``.

    Returns:
        A Faker proxy whose ``random`` attribute is the instance's own
        ``random.Random``.
    """
    fake = Faker(locale)
    fake.add_provider(CommerceProvider)
    fake.add_provider(CalendarProvider)
    # Always an instance-level Random; None seeds it from system entropy.
    fake.seed_instance(seed)
    return fake
