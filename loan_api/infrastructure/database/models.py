"""SQLAlchemy ORM models for tenants, users, the loan catalog and loans."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    JSON,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=datetime.utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )


class TenantModel(TimestampMixin, Base):
    """Persisted tenant (client organization)."""

    __tablename__ = "tenants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    code: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    config: Mapped[dict | None] = mapped_column(JSON, nullable=True)


class UserModel(TimestampMixin, Base):
    """Persisted borrower."""

    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("tenant_id", "email", name="uq_users_tenant_email"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tenant_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    document_type: Mapped[str] = mapped_column(String(50), nullable=False)
    document_number: Mapped[str] = mapped_column(String(100), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False, default="")


class LoanTypeModel(TimestampMixin, Base):
    """Persisted loan product."""

    __tablename__ = "loan_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tenant_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    code: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    min_amount: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False, default=0)
    max_amount: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    versions: Mapped[list["LoanTypeVersionModel"]] = relationship(
        "LoanTypeVersionModel",
        back_populates="loan_type",
        cascade="all, delete-orphan",
    )


class LoanTypeVersionModel(TimestampMixin, Base):
    """Persisted versioned form ruleset of a loan product."""

    __tablename__ = "loan_type_versions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    loan_type_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("loan_types.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    version: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    is_default: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    config: Mapped[dict | None] = mapped_column(JSON, nullable=True)

    loan_type: Mapped["LoanTypeModel"] = relationship(
        "LoanTypeModel",
        back_populates="versions",
    )
    forms: Mapped[list["LoanTypeFormModel"]] = relationship(
        "LoanTypeFormModel",
        back_populates="version",
        cascade="all, delete-orphan",
        order_by="LoanTypeFormModel.order",
    )


class LoanTypeFormModel(TimestampMixin, Base):
    """Persisted form (section) of a loan type version."""

    __tablename__ = "loan_type_forms"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    version_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("loan_type_versions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    label: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    code: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_required: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    config: Mapped[dict | None] = mapped_column(JSON, nullable=True)

    version: Mapped["LoanTypeVersionModel"] = relationship(
        "LoanTypeVersionModel",
        back_populates="forms",
    )
    inputs: Mapped[list["LoanTypeFormInputModel"]] = relationship(
        "LoanTypeFormInputModel",
        back_populates="form",
        cascade="all, delete-orphan",
        order_by="LoanTypeFormInputModel.order",
    )


class LoanTypeFormInputModel(TimestampMixin, Base):
    """Persisted input definition within a form."""

    __tablename__ = "loan_type_version_form_inputs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    form_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("loan_type_forms.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    label: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    code: Mapped[str] = mapped_column(String(100), nullable=False)
    input_type: Mapped[str] = mapped_column(String(50), nullable=False, default="text")
    placeholder: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    default_value: Mapped[str] = mapped_column(Text, nullable=False, default="")
    validation_rules: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    options: Mapped[list | None] = mapped_column(JSON, nullable=True)
    config: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_required: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    form: Mapped["LoanTypeFormModel"] = relationship(
        "LoanTypeFormModel",
        back_populates="inputs",
    )


class LoanModel(TimestampMixin, Base):
    """Persisted loan application."""

    __tablename__ = "loans"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    loan_type_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("loan_types.id"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    status: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="pending",
    )
    observation: Mapped[str] = mapped_column(Text, nullable=False, default="")
    amount_approved: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False, default=0)
    credit_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    identity_verified: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    data: Mapped[list["LoanDataModel"]] = relationship(
        "LoanDataModel",
        back_populates="loan",
        cascade="all, delete-orphan",
        order_by="LoanDataModel.id",
    )


class LoanDataModel(Base):
    """Persisted answer to a form input."""

    __tablename__ = "loan_data"
    __table_args__ = (UniqueConstraint("loan_id", "key", "index", name="uq_loan_data_key_index"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    loan_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("loans.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    form_id: Mapped[int] = mapped_column(Integer, nullable=False)
    key: Mapped[str] = mapped_column(String(100), nullable=False)
    value: Mapped[str] = mapped_column(Text, nullable=False, default="")
    index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    loan: Mapped["LoanModel"] = relationship(
        "LoanModel",
        back_populates="data",
    )
