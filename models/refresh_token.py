"""
RefreshToken model: stores opaque refresh tokens so they can be resolved and revoked
Fields:
- token (primary key, 64 hex chars)
- user_id (String(36)) - FK to users.id
- created_at, updated_at, expires_at
- revoked_at (null while the token is live)
"""
from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship

from models.base_model import Base, TimestampMixin, UTCDateTime


class RefreshToken(TimestampMixin, Base):
    __tablename__ = "refresh_tokens"

    token = Column(String(64), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    expires_at = Column(UTCDateTime(), nullable=False)
    revoked_at = Column(UTCDateTime(), nullable=True)

    user = relationship("User", back_populates="refresh_tokens")

    @property
    def revoked(self) -> bool:
        return self.revoked_at is not None

    def is_expired(self, now) -> bool:
        return self.expires_at <= now

    def __repr__(self):
        return f"<RefreshToken user={self.user_id} revoked={self.revoked}>"
