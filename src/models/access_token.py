"""Personal access token model."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class AccessToken(Base, TimestampMixin):
    """Opaque bearer token bound to one user.

    Only the SHA-256 digest of the secret is stored. The plain text form
    ``"<id>|<secret>"`` is shown to the client once, at issue time.
    """

    __tablename__ = "personal_access_tokens"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False)
    token = Column(String(64), unique=True, nullable=False)  # sha256 hex digest
    last_used_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    user = relationship("User", back_populates="access_tokens")
