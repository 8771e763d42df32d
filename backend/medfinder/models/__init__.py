from medfinder.models.pharmacy import Pharmacy
from medfinder.models.inventory import InventoryEntry

__all__ = ["Pharmacy", "InventoryEntry"]
