"""Unit tests for the DeletionGuard domain service."""

import pytest

from catalog.domain.service.deletion_guard import (
    DeletionDecision,
    DeletionGuard,
    DeletionReason,
)
from tests.fakes import FakeUsageLookup, make_product


class TestDeletionGuard:

    @pytest.mark.parametrize("in_use", [False, True])
    def test_stock_not_zero_refused_regardless_of_usage(self, in_use):
        usage = FakeUsageLookup({"1"} if in_use else set())
        decision = DeletionGuard(usage).can_delete(make_product(id="1", stock=5))
        assert not decision.allowed
        assert DeletionReason.STOCK_NOT_ZERO in decision.reasons

    def test_in_use_refused(self):
        decision = DeletionGuard(FakeUsageLookup({"1"})).can_delete(
            make_product(id="1", stock=0)
        )
        assert decision == DeletionDecision(False, (DeletionReason.IN_USE,))

    def test_allowed_only_when_no_stock_and_not_in_use(self):
        decision = DeletionGuard(FakeUsageLookup()).can_delete(
            make_product(id="1", stock=0)
        )
        assert decision == DeletionDecision(True, ())

    def test_both_reasons_reported(self):
        decision = DeletionGuard(FakeUsageLookup({"1"})).can_delete(
            make_product(id="1", stock=2)
        )
        assert decision.reasons == (DeletionReason.STOCK_NOT_ZERO, DeletionReason.IN_USE)

    def test_usage_is_checked_even_when_stock_fails(self):
        usage = FakeUsageLookup()
        DeletionGuard(usage).can_delete(make_product(id="1", stock=2))
        assert usage.calls == ["1"]

    def test_guard_does_not_mutate_product(self):
        product = make_product(id="1", stock=2)
        DeletionGuard(FakeUsageLookup({"1"})).can_delete(product)
        assert product.stock == 2


class TestDeletionDecision:

    def test_reason_codes(self):
        assert DeletionReason.STOCK_NOT_ZERO.value == "StockNotZero"
        assert DeletionReason.IN_USE.value == "InUse"

    def test_describe_lists_every_reason(self):
        decision = DeletionDecision.from_reasons(
            [DeletionReason.STOCK_NOT_ZERO, DeletionReason.IN_USE]
        )
        assert decision.describe() == (
            "stock must be zero; product is referenced by other records"
        )

    def test_describe_allowed(self):
        assert DeletionDecision.from_reasons([]).describe() == "deletion allowed"
