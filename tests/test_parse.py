import pytest

from ocmtools.parse import parse_labels


def test_parse_labels():
    assert parse_labels(["foo=bar", "app=web"]) == {"foo": "bar", "app": "web"}


def test_parse_empty():
    assert parse_labels([]) == {}


def test_later_label_wins():
    assert parse_labels(["k=a", "k=b"]) == {"k": "b"}


def test_empty_value_allowed():
    assert parse_labels(["k="]) == {"k": ""}


@pytest.mark.parametrize("label", ["novalue", "a=b=c"])
def test_parse_rejects_malformed(label):
    with pytest.raises(ValueError, match="Expected to be of the form: key=value"):
        parse_labels([label])