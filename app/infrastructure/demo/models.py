"""
ORM mapping for the ``demo`` table.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base
from app.domain.demo.entities import ACTIVE_FLAG, Demo


class DemoModel(Base):
    """Row of the ``demo`` table; ``field1`` carries a unique index."""

    __tablename__ = "demo"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    field1: Mapped[int] = mapped_column(Integer, unique=True, nullable=False)
    field2: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    is_deleted: Mapped[str] = mapped_column(
        String(1), nullable=False, default=ACTIVE_FLAG, server_default=ACTIVE_FLAG
    )
    create_time: Mapped[Optional[datetime]] = mapped_column(
        DateTime, server_default=func.now()
    )
    update_time: Mapped[Optional[datetime]] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )

    def to_entity(self) -> Demo:
        return Demo(
            id=self.id,
            field1=self.field1,
            field2=self.field2,
            is_deleted=self.is_deleted,
            create_time=self.create_time,
            update_time=self.update_time,
        )
