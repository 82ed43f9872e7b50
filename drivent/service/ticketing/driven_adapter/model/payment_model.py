from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from drivent.platform.database.orm_db_setting import Base


class PaymentModel(Base):
    __tablename__ = 'payment'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    ticket_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('ticket.id', ondelete='CASCADE'), nullable=False, index=True
    )
    value: Mapped[int] = mapped_column(Integer, nullable=False)
    card_issuer: Mapped[str] = mapped_column(String(255), nullable=False)
    card_last_digits: Mapped[str] = mapped_column(String(4), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
