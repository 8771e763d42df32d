"""
Audit logging for store mutations.

Every registration and inventory change is written as one JSON line on the
`audit` logger so it can be shipped separately from application logs.
"""
import logging
import json
from datetime import datetime, timezone
from typing import Any, Optional, Dict

audit_logger = logging.getLogger("audit")


class AuditLog:
    """Central audit logging for mutations."""

    @staticmethod
    def log_action(
        action: str,  # "register", "upsert", "update_stock", "remove"
        resource_type: str,  # "pharmacy", "inventory"
        resource_id: int,
        changes: Optional[Dict[str, Any]] = None,
        success: bool = True,
    ):
        """
        Usage:
            AuditLog.log_action("register", "pharmacy", 1001)
            AuditLog.log_action("remove", "inventory", 21, changes={"medicine": "paracetamol"})
        """
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event_type": f"{resource_type}.{action}",
            "resource_id": resource_id,
            "success": success,
        }

        if changes:
            log_entry["changes"] = changes

        if success:
            audit_logger.info(json.dumps(log_entry, default=str))
        else:
            audit_logger.warning(json.dumps(log_entry, default=str))
