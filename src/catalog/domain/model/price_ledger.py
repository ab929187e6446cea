"""Append-only price history of one product.

Entries are never edited or removed. A price correction is a new entry,
so the ledger doubles as an audit trail of every price the product had.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Iterator

from catalog.domain.exceptions import (
    EmptyLedgerError,
    NonMonotonicTimeError,
    ValidationError,
)
from catalog.domain.model.value_objects import Money


@dataclass(frozen=True)
class PriceEntry:
    value: Money
    effective_at: datetime
    reason: str | None = None


@dataclass(frozen=True)
class PriceChange:
    """A ledger entry seen next to the price it replaced."""

    previous: Money | None
    new: Money
    effective_at: datetime
    reason: str | None = None


class PriceLedger:
    """Ordered, append-only sequence of PriceEntry.

    Timestamps are non-decreasing in append order, so the last entry is
    always the current price (equal timestamps resolve to the later append).
    """

    def __init__(self, entries: Iterable[PriceEntry] = ()) -> None:
        self._entries: list[PriceEntry] = []
        for entry in entries:
            self._check_timestamp(entry.effective_at)
            self._entries.append(entry)

    def append(
        self,
        value: Money | Decimal | str | int,
        effective_at: datetime,
        reason: str | None = None,
    ) -> PriceEntry:
        """Record a new price.

        Raises InvalidValueError for a negative or malformed value and
        NonMonotonicTimeError when *effective_at* is earlier than the latest
        entry. The ledger is left untouched on either failure.
        """
        money = value if isinstance(value, Money) else Money.of(value)
        self._check_timestamp(effective_at)

        entry = PriceEntry(
            value=money,
            effective_at=effective_at,
            reason=(reason or "").strip() or None,
        )
        self._entries.append(entry)
        return entry

    def current(self) -> PriceEntry:
        if not self._entries:
            raise EmptyLedgerError("Price ledger has no entries")
        return self._entries[-1]

    def history(self) -> Iterator[PriceEntry]:
        """Iterate every entry, oldest first.

        Each call returns an independent iterator over the entries present
        at call time.
        """
        return iter(tuple(self._entries))

    def changes(self) -> Iterator[PriceChange]:
        """Iterate the history as (previous -> new) transitions."""
        previous: Money | None = None
        for entry in self.history():
            yield PriceChange(
                previous=previous,
                new=entry.value,
                effective_at=entry.effective_at,
                reason=entry.reason,
            )
            previous = entry.value

    def __len__(self) -> int:
        return len(self._entries)

    # --- Internal helpers -----------------------------------------------------

    def _check_timestamp(self, effective_at: datetime) -> None:
        if effective_at.tzinfo is None:
            raise ValidationError("Price timestamp must be timezone-aware")
        if self._entries and effective_at < self._entries[-1].effective_at:
            raise NonMonotonicTimeError(
                f"Price timestamp {effective_at.isoformat()} is earlier than the "
                f"latest entry ({self._entries[-1].effective_at.isoformat()})"
            )
