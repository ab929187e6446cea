"""Abstract lookup answering whether a product is referenced elsewhere.

Open orders, bundles and similar records live outside the catalog; the
deletion guard only needs a yes/no answer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class UsageLookup(ABC):

    @abstractmethod
    def is_in_use(self, product_id: str) -> bool:
        """Return True if any external record references the product."""
