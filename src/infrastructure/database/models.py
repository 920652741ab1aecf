"""SQLAlchemy ORM models for customers and credits."""

from datetime import date
from decimal import Decimal
from uuid import uuid4

from sqlalchemy import (
    Date,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class CustomerModel(Base):
    """Persisted customer record. The address is embedded as columns."""

    __tablename__ = "customer"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    cpf: Mapped[str] = mapped_column(String(14), nullable=False, unique=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    income: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    zip_code: Mapped[str] = mapped_column(String(20), nullable=False)
    street: Mapped[str] = mapped_column(String(255), nullable=False)

    credits: Mapped[list["CreditModel"]] = relationship(
        "CreditModel",
        back_populates="customer",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="CreditModel.id",
    )


class CreditModel(Base):
    """Persisted credit record."""

    __tablename__ = "credit"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    credit_code: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        nullable=False,
        unique=True,
        default=lambda: str(uuid4()),
    )
    credit_value: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    day_first_installment: Mapped[date] = mapped_column(Date, nullable=False)
    number_of_installments: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="IN_PROGRESS",
    )
    customer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("customer.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    customer: Mapped["CustomerModel"] = relationship(
        "CustomerModel",
        back_populates="credits",
    )
