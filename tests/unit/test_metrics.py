"""Unit tests for metrics module."""

import time
from unittest.mock import patch

import pytest
from prometheus_client import REGISTRY

from settlement_ledger.application.services import (
    OpenTransactionCommand,
    SettlementService,
)
from settlement_ledger.domain.models import PaymentMethod
from settlement_ledger.infrastructure.metrics import (
    SETTLED_AMOUNT_TOTAL,
    SETTLEMENT_DURATION_SECONDS,
    SETTLEMENTS_TOTAL,
    track_settlement_duration,
)


def sample(name: str, labels: dict[str, str]) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


class TestMetricDefinitions:
    """Tests for metric definitions."""

    def test_settlements_total_labels(self) -> None:
        """Test SETTLEMENTS_TOTAL has correct labels."""
        assert SETTLEMENTS_TOTAL._labelnames == ("payment_method", "status", "error_code")

    def test_settled_amount_total_labels(self) -> None:
        """Test SETTLED_AMOUNT_TOTAL is labelled by payment method."""
        assert SETTLED_AMOUNT_TOTAL._labelnames == ("payment_method",)

    def test_settlement_duration_buckets(self) -> None:
        """Test SETTLEMENT_DURATION_SECONDS has sub-second buckets."""
        expected_buckets = [0.0001, 0.00025, 0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05]
        # prometheus_client adds +Inf bucket automatically
        assert list(SETTLEMENT_DURATION_SECONDS._upper_bounds[:-1]) == expected_buckets


class TestTrackSettlementDuration:
    """Tests for track_settlement_duration decorator."""

    def test_decorator_returns_result(self) -> None:
        """Test decorator passes arguments through and returns the result."""

        @track_settlement_duration
        def sample_function(x: int, y: str = "y") -> tuple[int, str]:
            return (x, y)

        assert sample_function(1, y="z") == (1, "z")

    def test_decorator_observes_duration(self) -> None:
        """Test decorator observes duration to histogram."""
        with patch("settlement_ledger.infrastructure.metrics.SETTLEMENT_DURATION_SECONDS") as mock_histogram:

            @track_settlement_duration
            def sample_function() -> str:
                time.sleep(0.01)
                return "result"

            sample_function()

            mock_histogram.observe.assert_called_once()
            assert mock_histogram.observe.call_args[0][0] >= 0.01

    def test_decorator_observes_duration_on_exception(self) -> None:
        """Test decorator observes duration even on exception."""
        with patch("settlement_ledger.infrastructure.metrics.SETTLEMENT_DURATION_SECONDS") as mock_histogram:

            @track_settlement_duration
            def failing_function() -> None:
                raise ValueError("Test error")

            with pytest.raises(ValueError, match="Test error"):
                failing_function()

            mock_histogram.observe.assert_called_once()

    def test_decorator_preserves_function_name(self) -> None:
        """Test decorator preserves original function name."""

        @track_settlement_duration
        def named_function() -> None:
            pass

        assert named_function.__name__ == "named_function"


class TestSettlementMetrics:
    """Tests for metrics recorded by SettlementService."""

    def test_successful_settlement_counts(self, service: SettlementService) -> None:
        """Settled payments increment the counter and the moved amount."""
        labels = {"payment_method": "CASH", "status": "SETTLED", "error_code": ""}
        count_before = sample("settlements_total", labels)
        amount_before = sample("settled_amount_total", {"payment_method": "CASH"})

        service.open_transaction(
            OpenTransactionCommand(
                transaction_id=1,
                amount=55,
                sender_account_id=1,
                recipient_account_id=2,
                payment_method=PaymentMethod.CASH,
            )
        )
        service.settle(1)

        assert sample("settlements_total", labels) == count_before + 1
        assert sample("settled_amount_total", {"payment_method": "CASH"}) == amount_before + 49

    def test_declined_settlement_counts(self, service: SettlementService) -> None:
        """Declined payments are counted by error code."""
        labels = {"payment_method": "DEBIT", "status": "DECLINED", "error_code": "INSUFFICIENT_BALANCE"}
        before = sample("settlements_total", labels)

        service.open_transaction(
            OpenTransactionCommand(
                transaction_id=1,
                amount=500,
                sender_account_id=1,
                recipient_account_id=2,
                payment_method=PaymentMethod.DEBIT,
            )
        )
        service.settle(1)

        assert sample("settlements_total", labels) == before + 1

    def test_unknown_transaction_counts(self, service: SettlementService) -> None:
        """Settling an unregistered transaction is counted as declined."""
        labels = {"payment_method": "UNKNOWN", "status": "DECLINED", "error_code": "TRANSACTION_NOT_FOUND"}
        before = sample("settlements_total", labels)

        service.settle(42)

        assert sample("settlements_total", labels) == before + 1
