import uuid
from datetime import datetime

from sqlalchemy import DateTime, Float, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from tracker.db.base import Base


class Vote(Base):
    """One finished estimation round. Written by the voting service, read here."""

    __tablename__ = "votes"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    room: Mapped[str] = mapped_column(Text, nullable=False)
    avg_estimation: Mapped[float] = mapped_column(Float, nullable=False)
    min_estimation: Mapped[float] = mapped_column(Float, nullable=False)
    max_estimation: Mapped[float] = mapped_column(Float, nullable=False)
    amount_of_estimations: Mapped[int] = mapped_column(Integer, nullable=False)
    amount_of_spectators: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)  # seconds
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), index=True
    )
