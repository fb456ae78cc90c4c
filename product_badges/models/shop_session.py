from sqlalchemy import Column, String, Boolean, DateTime, Index
from sqlalchemy.sql import func
from product_badges.db import Base

class ShopSession(Base):
    __tablename__ = "sessions"

    id = Column(String(255), primary_key=True)           # offline_<shop> | <shop>_<user>
    shop = Column(String(255), nullable=False)
    state = Column(String(255), nullable=False, default="")
    is_online = Column(Boolean, default=False, nullable=False)
    scope = Column(String(1024), nullable=True)
    expires = Column(DateTime(timezone=True), nullable=True)
    access_token = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        Index("ix_sessions_shop", "shop"),
    )
