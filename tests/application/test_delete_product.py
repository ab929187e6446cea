"""Integration tests for the two-phase DeleteProduct use case."""

import pytest

from catalog.application.delete_product import DeleteProductHandler
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.service.deletion_guard import DeletionReason
from tests.fakes import FakeProductRepository, FakeUsageLookup, make_product


def _setup(stock=0, in_use=False):
    repo = FakeProductRepository([make_product(id="1", stock=stock)])
    usage = FakeUsageLookup({"1"} if in_use else set())
    return DeleteProductHandler(repo, usage), repo, usage


class TestCheck:

    def test_check_never_deletes(self):
        handler, repo, _ = _setup()
        assert handler.check("1").allowed
        assert repo.get_by_id("1") is not None

    def test_check_reports_reasons(self):
        handler, _, _ = _setup(stock=5, in_use=True)
        assert handler.check("1").reasons == (
            DeletionReason.STOCK_NOT_ZERO,
            DeletionReason.IN_USE,
        )

    def test_unknown_product(self):
        handler, _, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            handler.check("9")


class TestCommit:

    def test_commit_deletes_when_allowed(self):
        handler, repo, _ = _setup()
        assert handler.commit("1").allowed
        assert repo.get_by_id("1") is None
        assert repo.deleted == ["1"]

    def test_commit_refused_keeps_product(self):
        handler, repo, _ = _setup(in_use=True)
        decision = handler.commit("1")
        assert decision.reasons == (DeletionReason.IN_USE,)
        assert repo.get_by_id("1") is not None
        assert repo.deleted == []

    def test_commit_re_evaluates_after_check(self):
        handler, repo, usage = _setup()
        assert handler.check("1").allowed

        # An order referencing the product arrives between check and commit.
        usage.in_use.add("1")

        assert not handler.commit("1").allowed
        assert repo.deleted == []
