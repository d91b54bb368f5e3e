import pytest

from ocmtools.quantity import Quantity, QuantityFormat, parse_quantity


@pytest.mark.parametrize(
    "text", ["200m", "100m", "256Mi", "128Mi", "1", "1Gi", "500k", "-1", "0"]
)
def test_canonical_strings_round_trip(text):
    assert str(parse_quantity(text)) == text


def test_binary_is_normalised_to_largest_unit():
    assert str(parse_quantity("1024Ki")) == "1Mi"


def test_fraction_becomes_milli():
    assert str(parse_quantity("0.5")) == "500m"


def test_formats_follow_suffix():
    assert parse_quantity("1Ki").format is QuantityFormat.BINARY_SI
    assert parse_quantity("1k").format is QuantityFormat.DECIMAL_SI
    assert parse_quantity("1e3").format is QuantityFormat.DECIMAL_EXPONENT


def test_equal_amounts_compare_equal_across_notations():
    assert parse_quantity("1Ki") == parse_quantity("1024")
    assert parse_quantity("1e3") == parse_quantity("1k")
    assert hash(parse_quantity("1Ki")) == hash(parse_quantity("1024"))


def test_ordering_and_cmp():
    small, large = parse_quantity("100m"), parse_quantity("200m")
    assert small < large
    assert large > small
    assert small.cmp(large) == -1
    assert large.cmp(small) == 1
    assert small.cmp(parse_quantity("0.1")) == 0


def test_exponent_round_trip():
    q = parse_quantity("1e3")
    assert parse_quantity(str(q)) == q


def test_constructed_quantity_accepts_int():
    assert Quantity(2) == parse_quantity("2")


@pytest.mark.parametrize("text", ["", "abc", "1.2.3", "5Xi", "1e", "m"])
def test_invalid_quantities_raise(text):
    with pytest.raises(ValueError):
        parse_quantity(text)