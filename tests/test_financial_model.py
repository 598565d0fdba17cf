"""Unit tests for the per-card financial math.

Tests verify interest accrual, capped minimum payments, balance updates and
the fallback minimum policy against hand-calculated values.
"""

import pytest

from cardpayoff.model.financial_model import (
    CardState,
    compute_interest,
    compute_min_payment,
    default_minimum_payment,
    monthly_rate,
    round_up_to_cents,
    smallest_cent_above,
    update_balance,
)


# ── Fixtures ──────────────────────────────────────────────────────────────

@pytest.fixture
def sample_card() -> CardState:
    """Standard test card: $5000 balance, 24% APR, $150 minimum."""
    return CardState(
        card_id="c1",
        name="Test Card",
        apr=24.0,
        balance=5000.0,
        minimum_payment=150.0,
    )


@pytest.fixture
def small_balance_card() -> CardState:
    """Card whose balance is below its minimum payment."""
    return CardState(
        card_id="c2",
        name="Small Card",
        apr=19.9,
        balance=15.0,
        minimum_payment=25.0,
    )


@pytest.fixture
def paid_off_card() -> CardState:
    return CardState(
        card_id="c3",
        name="Done Card",
        apr=19.9,
        balance=0.0,
        minimum_payment=25.0,
        is_paid_off=True,
    )


# ── Interest Accrual ──────────────────────────────────────────────────────

class TestInterestAccrual:

    def test_monthly_rate_from_percentage(self):
        assert monthly_rate(24.0) == pytest.approx(0.02)
        assert monthly_rate(0.0) == 0.0

    def test_monthly_interest(self, sample_card):
        """Interest = balance × (APR / 100 / 12)."""
        assert compute_interest(sample_card) == pytest.approx(100.0, abs=0.01)

    def test_interest_twelve_months_minimum_only(self, sample_card):
        """12 months of minimum-only payments match a manual reducing-balance loop."""
        card = sample_card
        for _ in range(12):
            interest = compute_interest(card)
            update_balance(card, compute_min_payment(card, interest), interest)

        manual_balance = 5000.0
        for _ in range(12):
            manual_balance = manual_balance + manual_balance * 0.02 - 150.0

        assert card.balance == pytest.approx(manual_balance, abs=0.01)

    def test_interest_zero_for_paid_off(self, paid_off_card):
        assert compute_interest(paid_off_card) == 0.0

    def test_interest_zero_for_zero_apr(self):
        card = CardState("x", "X", apr=0.0, balance=1000.0, minimum_payment=25.0)
        assert compute_interest(card) == 0.0


# ── Minimum Payment ──────────────────────────────────────────────────────

class TestMinPayment:

    def test_card_minimum_used(self, sample_card):
        interest = compute_interest(sample_card)
        assert compute_min_payment(sample_card, interest) == pytest.approx(150.0)

    def test_cap_at_total_owed(self, small_balance_card):
        """Min payment can't exceed balance + interest."""
        interest = compute_interest(small_balance_card)
        min_pay = compute_min_payment(small_balance_card, interest)
        assert min_pay == pytest.approx(15.0 + interest)
        assert min_pay < 25.0

    def test_zero_for_paid_off(self, paid_off_card):
        assert compute_min_payment(paid_off_card, 0.0) == 0.0


# ── Balance Update ────────────────────────────────────────────────────────

class TestBalanceUpdate:

    def test_basic_update(self, sample_card):
        """B_{t+1} = B_t + I - P."""
        new_bal = update_balance(sample_card, 250.0, 100.0)
        assert new_bal == pytest.approx(4850.0)
        assert sample_card.balance == pytest.approx(4850.0)
        assert sample_card.is_paid_off is False

    def test_balance_floors_at_zero(self, sample_card):
        new_bal = update_balance(sample_card, 10000.0, 100.0)
        assert new_bal == 0.0
        assert sample_card.is_paid_off is True

    def test_sub_cent_balance_is_paid_off(self):
        card = CardState("x", "X", apr=0.0, balance=100.0, minimum_payment=25.0)
        update_balance(card, 99.995, 0.0)
        assert card.balance == 0.0
        assert card.is_paid_off is True

    def test_custom_threshold(self):
        card = CardState("x", "X", apr=0.0, balance=100.0, minimum_payment=25.0)
        update_balance(card, 99.5, 0.0, threshold=1.0)
        assert card.is_paid_off is True


# ── Policy helpers ───────────────────────────────────────────────────────

class TestDefaults:

    def test_default_minimum_uses_rate_above_floor(self):
        assert default_minimum_payment(5000.0) == pytest.approx(100.0)

    def test_default_minimum_uses_floor(self):
        assert default_minimum_payment(800.0) == pytest.approx(25.0)
        assert default_minimum_payment(0.0) == pytest.approx(25.0)

    def test_default_minimum_custom_policy(self):
        assert default_minimum_payment(1000.0, rate=0.03, floor=10.0) == pytest.approx(30.0)

    @pytest.mark.parametrize("amount, expected", [
        (10.0, 10.0),
        (30.000000000000004 - 20.0, 10.0),
        (10.001, 10.01),
        (99.99833, 100.0),
        (0.0, 0.0),
    ])
    def test_round_up_to_cents(self, amount, expected):
        assert round_up_to_cents(amount) == pytest.approx(expected)

    @pytest.mark.parametrize("amount, expected", [
        (10.0, 10.01),
        (30.000000000000004 - 20.0, 10.01),
        (10.004, 10.01),
        (0.0, 0.01),
    ])
    def test_smallest_cent_above(self, amount, expected):
        assert smallest_cent_above(amount) == pytest.approx(expected)
        assert smallest_cent_above(amount) > amount
