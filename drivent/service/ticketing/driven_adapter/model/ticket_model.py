from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from drivent.platform.database.orm_db_setting import Base


class TicketTypeModel(Base):
    __tablename__ = 'ticket_type'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    is_remote: Mapped[bool] = mapped_column(Boolean, nullable=False)
    includes_hotel: Mapped[bool] = mapped_column(Boolean, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )


class TicketModel(Base):
    __tablename__ = 'ticket'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    ticket_type_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('ticket_type.id'), nullable=False, index=True
    )
    enrollment_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('enrollment.id', ondelete='CASCADE'), nullable=False, index=True
    )
    status: Mapped[str] = mapped_column(String(20), default='RESERVED', nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    ticket_type: Mapped['TicketTypeModel'] = relationship('TicketTypeModel', lazy='selectin')
