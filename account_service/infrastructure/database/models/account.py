"""
Account SQLAlchemy model.
"""

from sqlalchemy import JSON, Column, Integer, String

from account_service.domain.value_objects.account_role import AccountRole

from .base import BaseModel


class AccountModel(BaseModel):
    """Account database model.

    Addresses are embedded as an ordered JSON list of address records, one
    document per account, so every address book mutation is a single-row
    write guarded by ``version``.
    """

    __tablename__ = "accounts"

    email = Column(String(255), unique=True, index=True, nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    role = Column(String(20), default=AccountRole.USER.value, nullable=False)
    addresses = Column(JSON, default=list, nullable=False)
    version = Column(Integer, default=1, nullable=False)

    def __repr__(self) -> str:
        return f"<Account(id={self.id}, email={self.email}, role={self.role})>"
