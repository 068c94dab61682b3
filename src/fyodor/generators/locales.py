"""Locale and country-code generators.

Locales come from the interpreter's own alias table (:data:`locale.locale_alias`),
reduced to distinct ``language[_COUNTRY]`` pairs and sorted, so a given Python
build always draws from the same ordered list.  Many entries have no country
(``"en"``, ``"eo"``) or a region with no ISO 3166 alpha-3 code in
:data:`ISO3_COUNTRIES`.  :class:`Iso3CountryGenerator` resamples those draws up
to ``max_attempts`` times instead of returning an empty code.
"""

from __future__ import annotations

import locale
import re
from dataclasses import dataclass
from functools import cache

from ..seed import RandomSource
from ..utils.errors import GenerationExhaustedError
from ..utils.logging import get_logger
from .base import DEFAULT_MAX_ATTEMPTS, Generator

log = get_logger(__name__)

_LOCALE_RE = re.compile(r"^([a-z]{2,3})(?:_([A-Z]{2}))?(?:[.@]|$)")


@dataclass(frozen=True, order=True)
class Locale:
    language: str
    country: str = ""

    @property
    def tag(self) -> str:
        return f"{self.language}_{self.country}" if self.country else self.language

    @property
    def iso3_country(self) -> str:
        """ISO 3166 alpha-3 code, or ``""`` when the locale has none."""

        return ISO3_COUNTRIES.get(self.country, "")

    def __str__(self) -> str:
        return self.tag


def parse_locale(name: str) -> Locale | None:
    """Parse ``ll[_CC][.encoding][@modifier]``; return ``None`` if unrecognized."""

    match = _LOCALE_RE.match(name)
    if match is None:
        return None
    return Locale(match.group(1), match.group(2) or "")


@cache
def available_locales() -> tuple[Locale, ...]:
    """Distinct locales known to this interpreter, sorted; built once per process."""

    found = {parse_locale(name) for name in locale.locale_alias.values()}
    found.discard(None)
    return tuple(sorted(found))  # type: ignore[type-var]


class LocaleGenerator(Generator[Locale]):
    def __init__(
        self, locales: tuple[Locale, ...] | None = None, source: RandomSource | None = None
    ) -> None:
        super().__init__(source)
        self.locales = available_locales() if locales is None else tuple(locales)
        if not self.locales:
            raise ValueError("no locales to choose from")

    def next(self) -> Locale:
        return self.locales[self.source.next_below(len(self.locales))]


class Iso3CountryGenerator(Generator[str]):
    """Three-letter ISO 3166 country codes taken from random locales.

    ``source`` only seeds the default locale generator.  A caller supplying
    ``locales`` binds the source on that generator instead; passing both raises
    ``ValueError``.
    """

    def __init__(
        self,
        locales: LocaleGenerator | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        source: RandomSource | None = None,
    ) -> None:
        super().__init__(source)
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if locales is not None and source is not None:
            raise ValueError("pass source to the locales generator, not alongside it")
        self.locales = locales if locales is not None else LocaleGenerator(source=source)
        self.max_attempts = max_attempts

    def next(self) -> str:
        for _ in range(self.max_attempts):
            country = self.locales.next().iso3_country
            if country:
                return country
        log.debug("no locale with an ISO 3 country in %d draws", self.max_attempts)
        raise GenerationExhaustedError(self.max_attempts, "ISO 3 country code")


# ISO 3166-1 alpha-2 to alpha-3.
ISO3_COUNTRIES: dict[str, str] = {
    "AD": "AND", "AE": "ARE", "AF": "AFG", "AG": "ATG", "AI": "AIA", "AL": "ALB",
    "AM": "ARM", "AO": "AGO", "AQ": "ATA", "AR": "ARG", "AS": "ASM", "AT": "AUT",
    "AU": "AUS", "AW": "ABW", "AX": "ALA", "AZ": "AZE", "BA": "BIH", "BB": "BRB",
    "BD": "BGD", "BE": "BEL", "BF": "BFA", "BG": "BGR", "BH": "BHR", "BI": "BDI",
    "BJ": "BEN", "BL": "BLM", "BM": "BMU", "BN": "BRN", "BO": "BOL", "BQ": "BES",
    "BR": "BRA", "BS": "BHS", "BT": "BTN", "BV": "BVT", "BW": "BWA", "BY": "BLR",
    "BZ": "BLZ", "CA": "CAN", "CC": "CCK", "CD": "COD", "CF": "CAF", "CG": "COG",
    "CH": "CHE", "CI": "CIV", "CK": "COK", "CL": "CHL", "CM": "CMR", "CN": "CHN",
    "CO": "COL", "CR": "CRI", "CU": "CUB", "CV": "CPV", "CW": "CUW", "CX": "CXR",
    "CY": "CYP", "CZ": "CZE", "DE": "DEU", "DJ": "DJI", "DK": "DNK", "DM": "DMA",
    "DO": "DOM", "DZ": "DZA", "EC": "ECU", "EE": "EST", "EG": "EGY", "EH": "ESH",
    "ER": "ERI", "ES": "ESP", "ET": "ETH", "FI": "FIN", "FJ": "FJI", "FK": "FLK",
    "FM": "FSM", "FO": "FRO", "FR": "FRA", "GA": "GAB", "GB": "GBR", "GD": "GRD",
    "GE": "GEO", "GF": "GUF", "GG": "GGY", "GH": "GHA", "GI": "GIB", "GL": "GRL",
    "GM": "GMB", "GN": "GIN", "GP": "GLP", "GQ": "GNQ", "GR": "GRC", "GS": "SGS",
    "GT": "GTM", "GU": "GUM", "GW": "GNB", "GY": "GUY", "HK": "HKG", "HM": "HMD",
    "HN": "HND", "HR": "HRV", "HT": "HTI", "HU": "HUN", "ID": "IDN", "IE": "IRL",
    "IL": "ISR", "IM": "IMN", "IN": "IND", "IO": "IOT", "IQ": "IRQ", "IR": "IRN",
    "IS": "ISL", "IT": "ITA", "JE": "JEY", "JM": "JAM", "JO": "JOR", "JP": "JPN",
    "KE": "KEN", "KG": "KGZ", "KH": "KHM", "KI": "KIR", "KM": "COM", "KN": "KNA",
    "KP": "PRK", "KR": "KOR", "KW": "KWT", "KY": "CYM", "KZ": "KAZ", "LA": "LAO",
    "LB": "LBN", "LC": "LCA", "LI": "LIE", "LK": "LKA", "LR": "LBR", "LS": "LSO",
    "LT": "LTU", "LU": "LUX", "LV": "LVA", "LY": "LBY", "MA": "MAR", "MC": "MCO",
    "MD": "MDA", "ME": "MNE", "MF": "MAF", "MG": "MDG", "MH": "MHL", "MK": "MKD",
    "ML": "MLI", "MM": "MMR", "MN": "MNG", "MO": "MAC", "MP": "MNP", "MQ": "MTQ",
    "MR": "MRT", "MS": "MSR", "MT": "MLT", "MU": "MUS", "MV": "MDV", "MW": "MWI",
    "MX": "MEX", "MY": "MYS", "MZ": "MOZ", "NA": "NAM", "NC": "NCL", "NE": "NER",
    "NF": "NFK", "NG": "NGA", "NI": "NIC", "NL": "NLD", "NO": "NOR", "NP": "NPL",
    "NR": "NRU", "NU": "NIU", "NZ": "NZL", "OM": "OMN", "PA": "PAN", "PE": "PER",
    "PF": "PYF", "PG": "PNG", "PH": "PHL", "PK": "PAK", "PL": "POL", "PM": "SPM",
    "PN": "PCN", "PR": "PRI", "PS": "PSE", "PT": "PRT", "PW": "PLW", "PY": "PRY",
    "QA": "QAT", "RE": "REU", "RO": "ROU", "RS": "SRB", "RU": "RUS", "RW": "RWA",
    "SA": "SAU", "SB": "SLB", "SC": "SYC", "SD": "SDN", "SE": "SWE", "SG": "SGP",
    "SH": "SHN", "SI": "SVN", "SJ": "SJM", "SK": "SVK", "SL": "SLE", "SM": "SMR",
    "SN": "SEN", "SO": "SOM", "SR": "SUR", "SS": "SSD", "ST": "STP", "SV": "SLV",
    "SX": "SXM", "SY": "SYR", "SZ": "SWZ", "TC": "TCA", "TD": "TCD", "TF": "ATF",
    "TG": "TGO", "TH": "THA", "TJ": "TJK", "TK": "TKL", "TL": "TLS", "TM": "TKM",
    "TN": "TUN", "TO": "TON", "TR": "TUR", "TT": "TTO", "TV": "TUV", "TW": "TWN",
    "TZ": "TZA", "UA": "UKR", "UG": "UGA", "UM": "UMI", "US": "USA", "UY": "URY",
    "UZ": "UZB", "VA": "VAT", "VC": "VCT", "VE": "VEN", "VG": "VGB", "VI": "VIR",
    "VN": "VNM", "VU": "VUT", "WF": "WLF", "WS": "WSM", "YE": "YEM", "YT": "MYT",
    "ZA": "ZAF", "ZM": "ZMB", "ZW": "ZWE",
}  # fmt: skip


__all__ = [
    "ISO3_COUNTRIES",
    "Iso3CountryGenerator",
    "Locale",
    "LocaleGenerator",
    "available_locales",
    "parse_locale",
]
