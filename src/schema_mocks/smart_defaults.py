"""Smart defaults: property name -> generator method path.

The table covers common property names found in real-world OpenAPI
documents. Keys are normalized with ``NameNormalizer.lookup_key`` (case-fold,
separators stripped), so ``first_name``, ``firstName``, ``First-Name`` and
``FIRSTNAME`` all hit the same entry.

Each entry records the kind of value its method returns. A match is only
used when that kind is compatible with the schema's declared type, so a
property called ``id`` declared as ``integer`` is not filled with a UUID
string.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum, auto
from types import MappingProxyType

from schema_mocks.naming import NameNormalizer

__all__ = ["SMART_DEFAULTS", "OutputKind", "SmartDefault", "get_smart_default"]

_normalizer = NameNormalizer()


class OutputKind(StrEnum):
    """Kind of value a generator method returns.

    STRUCTURED covers dates and timestamps: ISO strings that some schemas
    model as objects.
    """

    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    STRUCTURED = auto()


@dataclass(frozen=True, slots=True)
class SmartDefault:
    """A table entry: generator method path and the kind it returns."""

    method: str
    kind: OutputKind


_S, _N, _B, _D = (
    OutputKind.STRING,
    OutputKind.NUMBER,
    OutputKind.BOOLEAN,
    OutputKind.STRUCTURED,
)

_ENTRIES: dict[str, tuple[str, OutputKind]] = {
    # Identity
    "firstname": ("person.first_name", _S),
    "givenname": ("person.first_name", _S),
    "lastname": ("person.last_name", _S),
    "surname": ("person.last_name", _S),
    "familyname": ("person.last_name", _S),
    "fullname": ("person.name", _S),
    "name": ("person.name", _S),
    "displayname": ("person.name", _S),
    "username": ("internet.user_name", _S),
    "nickname": ("internet.user_name", _S),
    "login": ("internet.user_name", _S),
    "password": ("misc.password", _S),
    "avatar": ("internet.image_url", _S),
    "avatarurl": ("internet.image_url", _S),
    "bio": ("lorem.paragraph", _S),
    "jobtitle": ("job.job", _S),
    # Contact
    "email": ("internet.email", _S),
    "emailaddress": ("internet.email", _S),
    "phone": ("phone_number.phone_number", _S),
    "phonenumber": ("phone_number.phone_number", _S),
    "mobile": ("phone_number.phone_number", _S),
    # Web
    "url": ("internet.url", _S),
    "website": ("internet.url", _S),
    "homepage": ("internet.url", _S),
    "imageurl": ("internet.image_url", _S),
    "image": ("internet.image_url", _S),
    "photo": ("internet.image_url", _S),
    "domain": ("internet.domain_name", _S),
    "hostname": ("internet.hostname", _S),
    "ipaddress": ("internet.ipv4", _S),
    # Location
    "address": ("address.street_address", _S),
    "streetaddress": ("address.street_address", _S),
    "street": ("address.street_name", _S),
    "city": ("address.city", _S),
    "state": ("address.state", _S),
    "zip": ("address.postcode", _S),
    "zipcode": ("address.postcode", _S),
    "postcode": ("address.postcode", _S),
    "postalcode": ("address.postcode", _S),
    "country": ("address.country", _S),
    "countrycode": ("address.country_code", _S),
    "latitude": ("geo.latitude", _N),
    "lat": ("geo.latitude", _N),
    "longitude": ("geo.longitude", _N),
    "lng": ("geo.longitude", _N),
    "lon": ("geo.longitude", _N),
    # Content
    "title": ("lorem.sentence", _S),
    "description": ("lorem.paragraph", _S),
    "summary": ("lorem.paragraph", _S),
    "content": ("lorem.paragraph", _S),
    "comment": ("lorem.sentence", _S),
    "slug": ("internet.slug", _S),
    "filename": ("file.file_name", _S),
    "mimetype": ("file.mime_type", _S),
    # Business
    "company": ("company.company", _S),
    "companyname": ("company.company", _S),
    "organization": ("company.company", _S),
    "productname": ("commerce.product_name", _S),
    "price": ("commerce.price", _S),
    "amount": ("commerce.price", _S),
    "currency": ("currency.currency_code", _S),
    "currencycode": ("currency.currency_code", _S),
    "iban": ("bank.iban", _S),
    # Identifiers
    "id": ("misc.uuid4", _S),
    "uuid": ("misc.uuid4", _S),
    # Appearance
    "color": ("color.hex_color", _S),
    "colour": ("color.hex_color", _S),
    # Flags
    "active": ("misc.boolean", _B),
    "isactive": ("misc.boolean", _B),
    "enabled": ("misc.boolean", _B),
    "verified": ("misc.boolean", _B),
    # Timestamps
    "createdat": ("calendar.past_date_time_iso", _D),
    "updatedat": ("calendar.past_date_time_iso", _D),
    "deletedat": ("calendar.past_date_time_iso", _D),
    "timestamp": ("calendar.date_time_iso", _D),
    "birthdate": ("calendar.birth_date_iso", _D),
    "dateofbirth": ("calendar.birth_date_iso", _D),
}

SMART_DEFAULTS: MappingProxyType[str, SmartDefault] = MappingProxyType(
    {name: SmartDefault(method, kind) for name, (method, kind) in _ENTRIES.items()}
)

# Schema types each output kind may fill.
COMPATIBLE_SCHEMA_TYPES: MappingProxyType[OutputKind, frozenset[str]] = MappingProxyType(
    {
        OutputKind.STRING: frozenset({"string"}),
        OutputKind.NUMBER: frozenset({"number", "integer"}),
        OutputKind.BOOLEAN: frozenset({"boolean"}),
        OutputKind.STRUCTURED: frozenset({"object", "string"}),
    }
)


def _first_non_null(schema_type: str | Sequence[str] | None) -> str | None:
    if schema_type is None or isinstance(schema_type, str):
        return schema_type
    return next((t for t in schema_type if t != "null"), None)


def get_smart_default(
    property_name: str,
    schema_type: str | Sequence[str] | None = None,
) -> str | None:
    """Look up the generator method path for ``property_name``.

    Args:
        property_name: The schema property name (any naming convention).
        schema_type:   The schema's declared ``type``: a single name, a list
                       (its first non-null entry is used) or None. An
                       undeclared type skips the compatibility check.

    Returns:
        The method path, or None when there is no entry or the entry's output
        kind conflicts with the declared type.
    """
    entry = SMART_DEFAULTS.get(_normalizer.lookup_key(property_name))
    if entry is None:
        return None

    resolved = _first_non_null(schema_type)
    if resolved is not None and resolved not in COMPATIBLE_SCHEMA_TYPES[entry.kind]:
        return None
    return entry.method
