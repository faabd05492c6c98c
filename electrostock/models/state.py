from datetime import datetime

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from electrostock.database import Base


class StateCollection(Base):
    """One serialized collection (the catalog or the ledger) per row."""

    __tablename__ = "state_collections"

    key: Mapped[str] = mapped_column(String, primary_key=True)
    payload: Mapped[str] = mapped_column(Text, nullable=False, default="[]")  # JSON array
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())
