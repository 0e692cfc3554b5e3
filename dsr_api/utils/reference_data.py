"""Static process-type reference table.

The table is built once at import and never mutated afterwards, so
``list_process_types`` can be called from any number of request threads
without locking.
"""
from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class ProcessTypeEntry:
    code: str
    description: str


class UnknownProcessTypeError(KeyError):
    """Raised when a code is not in the process-type table."""

    def __init__(self, code: str):
        super().__init__(code)
        self.code = code

    def __str__(self):
        return f"Unknown process type: {self.code}"


def build_table(pairs: Iterable[Tuple[str, str]]) -> Tuple[ProcessTypeEntry, ...]:
    """Build an immutable table from (code, description) pairs, keeping order."""
    table = tuple(ProcessTypeEntry(code, description) for code, description in pairs)
    if not table:
        raise ValueError("process type table must not be empty")
    seen = set()
    for entry in table:
        if not entry.code:
            raise ValueError("process type code must not be empty")
        if entry.code in seen:
            raise ValueError(f"duplicate process type code: {entry.code}")
        seen.add(entry.code)
    return table


PROCESS_TYPES = build_table([
    ("A", "Add"),
    ("U", "Update"),
])

_BY_CODE = {entry.code: entry for entry in PROCESS_TYPES}


def list_process_types() -> Tuple[ProcessTypeEntry, ...]:
    return PROCESS_TYPES


def get_process_type(code: str) -> ProcessTypeEntry:
    """Look up one entry by its code (case-sensitive)."""
    try:
        return _BY_CODE[code]
    except KeyError:
        raise UnknownProcessTypeError(code) from None
