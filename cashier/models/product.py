import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String

from cashier.core.constants import BARCODE_INDEX, PRODUCTS_TABLE, ProductTypes, UnitTypes
from cashier.database.base import Base


class Product(Base):
    __tablename__ = PRODUCTS_TABLE

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    barcode = Column(String, nullable=False, default="")
    name = Column(String, nullable=False)
    description = Column(String, nullable=False, default="")

    price = Column(Integer, nullable=False, default=0)
    stock = Column(Integer, nullable=False, default=0)

    product_type = Column(String, nullable=False, default=ProductTypes.ALIMENTOS)
    unit_type = Column(String, nullable=False, default=UnitTypes.UNIT)
    is_active = Column(Boolean, nullable=False, default=True)

    creation_date = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    last_update_date = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index(BARCODE_INDEX, "barcode"),
        Index("idx_products_active_name", "is_active", "name"),
    )


__all__ = ["Product"]
