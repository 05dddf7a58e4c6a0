import json
import logging
import uuid
from datetime import timedelta
from pathlib import Path
from typing import Optional

from pydantic import ValidationError as SchemaValidationError

from cashier.config import get_settings
from cashier.core.dates import utc_now
from cashier.core.errors import PersistenceError
from cashier.repositories.messages import MessageRepository
from cashier.repositories.products import ProductRepository
from cashier.schemas.product import ProductCreate, ProductData

logger = logging.getLogger(__name__)


class SeedDataService:
    """Loads sample products and messages into an empty database.

    Expected file shape::

        {"seedData": {"enabled": true,
                      "products": [{"name": ..., "barCode": ..., ...}],
                      "messages": [{"message": ..., "minutesAgo": 5}]}}

    Seeding is best-effort: a missing or malformed file, a disabled flag or a
    store error is logged and leaves the database untouched.
    """

    def __init__(
        self,
        products: Optional[ProductRepository] = None,
        messages: Optional[MessageRepository] = None,
        *,
        seed_path=None,
        clock=utc_now,
    ):
        self._products = products or ProductRepository()
        self._messages = messages or MessageRepository()
        self._seed_path = Path(seed_path or get_settings().SEED_DATA_PATH)
        self._clock = clock

    def seed_database(self) -> int:
        """Returns the number of products inserted."""
        try:
            if self._products.count() > 0:
                logger.info("Seed skipped: products already exist.")
                return 0

            config = self._load_seed_config()
            if config is None:
                return 0

            now = self._clock()
            products = self._build_products(config.get("products") or [], now)
            inserted = self._products.insert_many(products) if products else 0

            messages = self._build_messages(config.get("messages") or [], now)
            if messages and self._messages.count() == 0:
                self._messages.add_many(messages)
        except PersistenceError:
            logger.exception("Error seeding database")
            return 0

        logger.info(
            "Database seeded with %d products and %d messages from %s",
            inserted,
            len(messages),
            self._seed_path,
        )
        return inserted

    def _load_seed_config(self) -> Optional[dict]:
        if not self._seed_path.exists():
            logger.warning("Seed data file not found: %s", self._seed_path)
            return None
        try:
            payload = json.loads(self._seed_path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.exception("Error loading seed data from %s", self._seed_path)
            return None

        config = payload.get("seedData") if isinstance(payload, dict) else None
        if not isinstance(config, dict) or config.get("enabled") is not True:
            logger.info("Seed data is disabled in configuration")
            return None
        return config

    @staticmethod
    def _build_products(entries, now) -> list[ProductData]:
        products = []
        for index, entry in enumerate(entries):
            try:
                base = ProductCreate.model_validate(entry)
            except SchemaValidationError:
                logger.warning("Skipping invalid seed product at position %d", index)
                continue
            if not base.name.strip() or base.price < 0 or base.stock < 0:
                logger.warning("Skipping invalid seed product at position %d", index)
                continue
            data = ProductData(**base.model_dump())
            data.id = str(uuid.uuid4())
            data.is_active = True
            data.creation_date = now
            data.last_update_date = now
            products.append(data)
        return products

    @staticmethod
    def _build_messages(entries, now) -> list[tuple]:
        messages = []
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            text = str(entry.get("message") or "").strip()
            if not text:
                continue
            try:
                minutes_ago = int(entry.get("minutesAgo") or 0)
            except (TypeError, ValueError):
                minutes_ago = 0
            messages.append((text, now - timedelta(minutes=minutes_ago)))
        return messages


__all__ = ["SeedDataService"]
