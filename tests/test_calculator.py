"""Test discount percentage arithmetic and its clamps."""

from decimal import Decimal

from cart_price_transform.src.calculator import (
    adjusted_unit_price,
    calculate_discount_percentage,
    clamp_percentage,
)


def test_target_below_original():
    """$600 target on a 1000 line is a 40% decrease."""
    assert calculate_discount_percentage(Decimal("1000"), Decimal("600")) == 40


def test_fractional_target():
    """Cents survive the computation exactly."""
    result = calculate_discount_percentage(Decimal("20"), Decimal("19.99"))
    assert result == Decimal("0.05")


def test_target_equal_to_original_is_no_discount():
    """A target equal to the original price yields 0."""
    for price in ["0.01", "1", "19.99", "1000"]:
        assert calculate_discount_percentage(Decimal(price), Decimal(price)) == 0


def test_target_above_original_is_clamped_to_zero():
    """A higher target never becomes a premium."""
    assert calculate_discount_percentage(Decimal("1000"), Decimal("1500")) == 0


def test_zero_target_is_full_discount():
    """A target of zero yields 100 for any positive price."""
    for price in ["0.01", "5", "1000"]:
        assert calculate_discount_percentage(Decimal(price), Decimal("0")) == 100


def test_negative_target_is_clamped_to_hundred():
    """Raw percentages above 100 are capped."""
    assert calculate_discount_percentage(Decimal("100"), Decimal("-50")) == 100


def test_non_positive_original_is_zero():
    """Zero or negative original prices never produce a discount."""
    for original in ["0", "-1", "-1000"]:
        for target in ["-5", "0", "10", "5000"]:
            result = calculate_discount_percentage(Decimal(original), Decimal(target))
            assert result == 0, f"original={original} target={target} gave {result}"


def test_bounds_hold_for_spread_of_inputs():
    """Percentage stays within [0, 100] for positive originals."""
    originals = ["0.01", "1", "49.5", "1000", "123456.78"]
    targets = ["-1000", "-0.01", "0", "0.5", "1", "49.5", "999.99", "1000000"]
    for original in originals:
        for target in targets:
            result = calculate_discount_percentage(Decimal(original), Decimal(target))
            assert 0 <= result <= 100, f"original={original} target={target} gave {result}"


def test_monotonic_as_target_decreases():
    """Lowering the target never lowers the discount."""
    targets = [Decimal(t) for t in ["2000", "1000", "750", "600", "100", "0", "-10"]]
    results = [calculate_discount_percentage(Decimal("1000"), t) for t in targets]
    print(f"\nPercentages for decreasing targets: {results}")
    assert results == sorted(results)


def test_accepts_plain_numbers():
    """Floats and ints are converted without binary noise."""
    assert calculate_discount_percentage(1000, 600) == 40
    assert calculate_discount_percentage(20.0, 19.99) == Decimal("0.05")


def test_huge_exponent_target_saturates():
    """Absurd targets clamp instead of raising."""
    assert calculate_discount_percentage(Decimal("1000"), Decimal("1e999999999")) == 0
    assert calculate_discount_percentage(Decimal("1000"), Decimal("-1e999999999")) == 100


def test_clamp_percentage():
    """Clamp keeps in-range values unchanged."""
    assert clamp_percentage(Decimal("-3")) == 0
    assert clamp_percentage(Decimal("42.5")) == Decimal("42.5")
    assert clamp_percentage(Decimal("250")) == 100


def test_adjusted_unit_price():
    """Adjusted price is rounded to cents."""
    assert adjusted_unit_price(Decimal("1000"), Decimal("40")) == Decimal("600.00")
    assert adjusted_unit_price(Decimal("10"), Decimal("33.333")) == Decimal("6.67")
    assert adjusted_unit_price(Decimal("10"), Decimal("0")) == Decimal("10.00")
    assert adjusted_unit_price(Decimal("10"), Decimal("100")) == Decimal("0.00")


def test_adjusted_unit_price_beyond_cent_precision():
    """Amounts too large to carry cents come back unrounded instead of raising."""
    print(f"\nAdjusted 1e30 at 40%: {adjusted_unit_price(Decimal('1e30'), Decimal('40'))}")
    assert adjusted_unit_price(Decimal("1e30"), Decimal("40")) == Decimal("6e29")
    assert adjusted_unit_price(Decimal("1e26"), Decimal("0")) == Decimal("1e26")
    assert adjusted_unit_price(Decimal("1e999999999"), Decimal("0")).is_infinite()
