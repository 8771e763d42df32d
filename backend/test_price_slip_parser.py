"""Validation of image-to-text output for price slips."""
import pytest

from medfinder.core.exceptions import PriceSlipParseError
from medfinder.schemas.inventory import StockStatus
from medfinder.services.price_slip_parser import parse_price_slip_response


def test_parses_array_and_defaults_stock():
    text = '  [{"medicineName": "Paracetamol 500mg", "price": 30.50}, {"medicineName": "Dolo 650", "price": 32}]\n'

    items = parse_price_slip_response(text)

    assert [(i.medicine_name, i.price, i.stock) for i in items] == [
        ("Paracetamol 500mg", 30.5, StockStatus.InStock),
        ("Dolo 650", 32.0, StockStatus.InStock),
    ]


def test_keeps_explicit_stock():
    items = parse_price_slip_response('[{"medicineName": "Crocin", "price": 24, "stock": "Low Stock"}]')
    assert items[0].stock == StockStatus.LowStock


def test_empty_array_is_valid():
    assert parse_price_slip_response("[]") == []


@pytest.mark.parametrize(
    "text",
    [
        "",
        "Sorry, I could not read this image.",
        '{"medicineName": "Crocin", "price": 24}',
        "[not json]",
        '[{"price": 24}]',
        '[{"medicineName": "Crocin", "price": "cheap"}]',
        '[{"medicineName": "Crocin", "price": -5}]',
        '[{"medicineName": "Crocin", "price": 24, "stock": "Plenty"}]',
    ],
)
def test_rejects_malformed_output(text):
    with pytest.raises(PriceSlipParseError):
        parse_price_slip_response(text)
