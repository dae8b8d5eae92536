from __future__ import annotations

import dataclasses
from typing import Any

from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from ..records.store import RecordStore
from .model import FIELD_ALIASES, CompanyProfile


class CompanyService:
    def __init__(self, store: RecordStore):
        self._store = store

    def get(self) -> CompanyProfile:
        return self._store.get_company_profile()

    def update(self, changes: dict[str, Any]) -> CompanyProfile:
        kwargs = {}
        for key, value in changes.items():
            attr = FIELD_ALIASES.get(key)
            if attr is None:
                raise ValidationError(f"Unknown profile field: {key!r}")
            kwargs[attr] = "" if value is None else str(value)

        if "name" in kwargs:
            kwargs["name"] = require_non_empty(kwargs["name"], "Company name")

        profile = dataclasses.replace(self.get(), **kwargs)
        self._store.set_company_profile(profile)
        return profile
