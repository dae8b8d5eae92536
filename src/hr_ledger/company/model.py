from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional

_JSON_KEYS = {
    "name": "name",
    "type": "type",
    "address": "address",
    "contact": "contact",
    "logo": "logo",
    "email": "email",
    "dise_code": "diseCode",
    "session": "session",
    "location_header": "locationHeader",
}


@dataclass(frozen=True)
class CompanyProfile:
    name: str
    type: str = ""
    address: str = ""
    contact: str = ""
    logo: str = ""
    email: str = ""
    dise_code: Optional[str] = None
    session: Optional[str] = None
    location_header: Optional[str] = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "CompanyProfile":
        kwargs = {attr: data[key] for attr, key in _JSON_KEYS.items() if data.get(key) is not None}
        kwargs.setdefault("name", DEFAULT_PROFILE.name)
        return cls(**kwargs)

    def to_json(self) -> dict[str, Any]:
        return {_JSON_KEYS[k]: v for k, v in asdict(self).items() if v is not None}


DEFAULT_PROFILE = CompanyProfile(
    name="EXCEL ENTERPRISE SOLUTIONS",
    type="Enterprise",
    address="123 Business Park, India",
    contact="+91 99999 88888",
    logo="",
    email="admin@excelpro.com",
    location_header="MAIN HEAD OFFICE",
)

FIELD_ALIASES = {**{k: k for k in _JSON_KEYS}, **{v: k for k, v in _JSON_KEYS.items()}}
