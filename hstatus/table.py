from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping

from msgspec import Struct

from hstatus.constant.status import STATUS_ENTRIES, StatusEntry


class StatusTable(Struct, frozen=True):
    """
    Read-only pair of lookup tables built from the status entries.

    - `reasons`: `str(code)` -> reason phrase
    - `codes`: reason phrase -> `int` code
    """

    reasons: Mapping[str, str]
    codes: Mapping[str, int]

    @classmethod
    def from_entries(cls, entries: Iterable[StatusEntry]) -> "StatusTable":
        reasons: dict[str, str] = {}
        codes: dict[str, int] = {}
        for entry in entries:
            reasons[str(entry.code)] = entry.phrase
            # last one wins on duplicated phrase
            codes[entry.phrase] = entry.code
        return cls(reasons=MappingProxyType(reasons), codes=MappingProxyType(codes))

    def __len__(self) -> int:
        return len(self.reasons)


@lru_cache(maxsize=1)
def status_table() -> StatusTable:
    return StatusTable.from_entries(STATUS_ENTRIES)


def reason_table() -> Mapping[str, str]:
    return status_table().reasons


def reverse_table() -> Mapping[str, int]:
    return status_table().codes
