"""Backfill of missing driver fields."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from f1gallery.models.driver import Driver

INTERNATIONAL = "INT"

DEFAULT_COUNTRY_FALLBACKS: Mapping[str, str] = MappingProxyType({
    "VERSTAPPEN": "NLD",
    "NORRIS": "GBR",
    "HAMILTON": "GBR",
    "RUSSELL": "GBR",
    "LECLERC": "MON",
    "SAINZ": "ESP",
    "ALONSO": "ESP",
    "PIASTRI": "AUS",
    "GASLY": "FRA",
    "OCON": "FRA",
    "TSUNODA": "JPN",
    "ALBON": "THA",
    "STROLL": "CAN",
    "HULKENBERG": "DEU",
    "BEARMAN": "GBR",
    "ANTONELLI": "ITA",
    "COLAPINTO": "ARG",
    "BORTOLETO": "BRA",
    "HADJAR": "FRA",
    "LAWSON": "NZL",
})


class CountryCodeNormalizer:
    """Fills in a driver's missing country code from a surname table.

    Drivers whose surname is not in the table get ``"INT"``. Drivers that
    already carry a country code are returned unchanged, which makes the
    operation idempotent.
    """

    def __init__(self, fallbacks: Mapping[str, str] = DEFAULT_COUNTRY_FALLBACKS) -> None:
        self._fallbacks = MappingProxyType(
            {surname.upper(): code for surname, code in fallbacks.items()}
        )

    @property
    def fallbacks(self) -> Mapping[str, str]:
        return self._fallbacks

    def country_for(self, driver: Driver) -> str:
        """Return the fallback country code for *driver*'s surname."""
        return self._fallbacks.get(driver.surname_key, INTERNATIONAL)

    def normalize(self, driver: Driver) -> Driver:
        if driver.country_code:
            return driver
        return driver.model_copy(update={"country_code": self.country_for(driver)})

    def normalize_all(self, drivers: Iterable[Driver]) -> list[Driver]:
        return [self.normalize(d) for d in drivers]

    __call__ = normalize


_default_normalizer = CountryCodeNormalizer()


def normalize_driver(
    driver: Driver,
    fallbacks: Mapping[str, str] | None = None,
) -> Driver:
    """Return *driver* with a non-empty ``country_code``."""
    normalizer = _default_normalizer if fallbacks is None else CountryCodeNormalizer(fallbacks)
    return normalizer.normalize(driver)


def normalize_drivers(
    drivers: Iterable[Driver],
    fallbacks: Mapping[str, str] | None = None,
) -> list[Driver]:
    normalizer = _default_normalizer if fallbacks is None else CountryCodeNormalizer(fallbacks)
    return normalizer.normalize_all(drivers)
