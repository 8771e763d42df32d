"""Create all tables. Run on app startup."""
import logging

from medfinder.db.base import Base
from medfinder.db.session import engine
from medfinder.models import inventory, pharmacy  # noqa: F401 - register models

logger = logging.getLogger(__name__)


def init_db(bind=None):
    target = bind if bind is not None else engine
    Base.metadata.create_all(bind=target)
    logger.info(f"Database tables ready: {', '.join(sorted(Base.metadata.tables))}")
