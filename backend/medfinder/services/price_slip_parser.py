"""
Price slip parsing.

The image-to-text service is asked to return a JSON array of
`{"medicineName": str, "price": number}` objects for a photographed price
list. This module validates that text before it reaches the inventory.
Items without a stock status are taken to be In Stock.
"""
import json
import logging
from typing import List

from pydantic import TypeAdapter, ValidationError

from medfinder.core.exceptions import PriceSlipParseError
from medfinder.schemas.inventory import InventoryItem

logger = logging.getLogger(__name__)

_items_adapter = TypeAdapter(List[InventoryItem])


def parse_price_slip_response(text: str) -> List[InventoryItem]:
    """
    Turn the extraction service's raw response into inventory items.

    Raises:
        PriceSlipParseError: the text is not a JSON array of valid items.
    """
    json_string = (text or "").strip()
    if not (json_string.startswith("[") and json_string.endswith("]")):
        logger.error(f"Price slip extraction returned non-array response: {json_string[:200]!r}")
        raise PriceSlipParseError("Could not parse the price slip. The format was unexpected.")

    try:
        raw_items = json.loads(json_string)
    except json.JSONDecodeError as e:
        logger.error(f"Price slip extraction returned invalid JSON: {e}")
        raise PriceSlipParseError("Could not parse the price slip. The format was unexpected.") from e

    try:
        items = _items_adapter.validate_python(raw_items)
    except ValidationError as e:
        logger.error(f"Price slip items failed validation: {e.error_count()} error(s)")
        raise PriceSlipParseError("Price slip contained items without a valid name or price.") from e

    logger.info(f"Parsed {len(items)} item(s) from price slip")
    return items
