import enum
import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from tracker.db.base import Base


class RouteType(str, enum.Enum):
    HOME = "HOME"
    CONTACT = "CONTACT"
    IMPRINT = "IMPRINT"
    ROOM = "ROOM"
    ANALYTICS = "ANALYTICS"
    ROADMAP = "ROADMAP"
    GUIDE = "GUIDE"
    AIMS = "AIMS"


ROUTE_VALUES = tuple(r.value for r in RouteType)


class PageView(Base):
    __tablename__ = "page_views"
    __table_args__ = (
        CheckConstraint(
            "route IN (" + ", ".join(f"'{r}'" for r in ROUTE_VALUES) + ")",
            name="route",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    visitor_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("visitors.id"), nullable=False, index=True
    )
    route: Mapped[str] = mapped_column(Text, nullable=False)
    room: Mapped[str | None] = mapped_column(Text, nullable=True)
    viewed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), index=True
    )
