from sqlalchemy import Column, String, DateTime, Integer, ForeignKey, UniqueConstraint

from app.core.database import Base
from app.models.user import utcnow


class Favorite(Base):
    """One country code in a user's favorites; row id gives display order"""
    __tablename__ = "favorites"
    __table_args__ = (
        UniqueConstraint("user_id", "country_code", name="uq_favorites_user_country"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    country_code = Column(String(64), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def __repr__(self):
        return f"<Favorite {self.user_id}:{self.country_code}>"
