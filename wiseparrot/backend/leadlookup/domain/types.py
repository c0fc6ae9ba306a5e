# leadlookup/domain/types.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Any, Mapping


# Recognized display fields, in table column order.
DATE_FIELD = "Date"
NAME_FIELD = "Name"
QUALITY_FIELD = "Lead Quality"
SCORE_FIELD = "Lead Score"
SUGGESTION_FIELD = "Suggestion"

DISPLAY_FIELDS = (DATE_FIELD, NAME_FIELD, QUALITY_FIELD, SCORE_FIELD, SUGGESTION_FIELD)

# Priority order matters: the first alias carrying a value wins.
ACCOUNT_ID_ALIASES = ("Account ID", "AccountID", "Account_ID")


class Tier(IntEnum):
    STRONG = 1
    MEDIUM = 2
    WEAK = 3
    DEFAULT = 4


class SearchOutcome(str, Enum):
    success = "success"
    no_results = "no_results"
    invalid_input = "invalid_input"
    missing_date = "missing_date"
    missing_account_id = "missing_account_id"
    rate_limited = "rate_limited"
    not_found_or_misconfigured = "not_found_or_misconfigured"
    unknown = "unknown"


@dataclass(frozen=True)
class LeadRecord:
    record_id: str
    # mappingproxy is unhashable; records hash by record_id
    fields: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Read-only view; the remote payload dict is copied so callers can't mutate it later.
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def get(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)

    @classmethod
    def from_payload(cls, item: Mapping[str, Any]) -> "LeadRecord":
        """
        Build from one entry of the remote `data.records` list:
          {"recordId": "rec...", "fields": {...}}
        Missing or non-object `fields` becomes an empty mapping.
        """
        fields = item.get("fields")
        if not isinstance(fields, Mapping):
            fields = {}
        rid = item.get("recordId")
        return cls(record_id="" if rid is None else str(rid), fields=fields)


@dataclass(frozen=True)
class SearchResult:
    outcome: SearchOutcome
    records: tuple[LeadRecord, ...] = ()
    message: str | None = None
    date_key: str | None = None

    @property
    def ok(self) -> bool:
        return self.outcome in (SearchOutcome.success, SearchOutcome.no_results)
