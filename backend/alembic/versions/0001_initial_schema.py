"""Initial boarding house schema.

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "owners",
        sa.Column("owner_id", sa.String(length=20), primary_key=True),
        sa.Column("first_name", sa.String(length=120), nullable=False),
        sa.Column("last_name", sa.String(length=120), nullable=False),
        sa.Column("contact_number", sa.String(length=32)),
        sa.Column("email", sa.String(length=255)),
        *_timestamps(),
        sa.UniqueConstraint("email", name="uq_owners_email"),
    )

    op.create_table(
        "caretakers",
        sa.Column("caretaker_id", sa.String(length=20), primary_key=True),
        sa.Column(
            "owner_id",
            sa.String(length=20),
            sa.ForeignKey("owners.owner_id", name="fk_caretakers_owner_id_owners"),
            nullable=False,
        ),
        sa.Column("first_name", sa.String(length=120), nullable=False),
        sa.Column("last_name", sa.String(length=120), nullable=False),
        sa.Column("contact_number", sa.String(length=32)),
        sa.Column("email", sa.String(length=255)),
        *_timestamps(),
        sa.UniqueConstraint("email", name="uq_caretakers_email"),
    )

    op.create_table(
        "employees",
        sa.Column("employee_id", sa.String(length=20), primary_key=True),
        sa.Column(
            "caretaker_id",
            sa.String(length=20),
            sa.ForeignKey(
                "caretakers.caretaker_id",
                name="fk_employees_caretaker_id_caretakers",
            ),
            nullable=False,
        ),
        sa.Column("first_name", sa.String(length=120), nullable=False),
        sa.Column("last_name", sa.String(length=120), nullable=False),
        sa.Column("position", sa.String(length=80)),
        sa.Column("contact_number", sa.String(length=32)),
        *_timestamps(),
    )

    room_status_enum = sa.Enum(
        "AVAILABLE", "OCCUPIED", "MAINTENANCE", name="roomstatus"
    )
    op.create_table(
        "rooms",
        sa.Column("room_id", sa.String(length=20), primary_key=True),
        sa.Column("floor", sa.String(length=20), nullable=False),
        sa.Column("rent_amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("status", room_status_enum, nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_rooms_status", "rooms", ["status"])

    op.create_table(
        "boarders",
        sa.Column("boarder_id", sa.String(length=20), primary_key=True),
        sa.Column("first_name", sa.String(length=120), nullable=False),
        sa.Column("middle_name", sa.String(length=120)),
        sa.Column("last_name", sa.String(length=120), nullable=False),
        sa.Column("contact_number", sa.String(length=32)),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column(
            "room_id",
            sa.String(length=20),
            sa.ForeignKey("rooms.room_id", name="fk_boarders_room_id_rooms"),
        ),
        sa.Column(
            "caretaker_id",
            sa.String(length=20),
            sa.ForeignKey(
                "caretakers.caretaker_id", name="fk_boarders_caretaker_id_caretakers"
            ),
        ),
        sa.Column(
            "employee_id",
            sa.String(length=20),
            sa.ForeignKey(
                "employees.employee_id", name="fk_boarders_employee_id_employees"
            ),
        ),
        *_timestamps(),
        sa.UniqueConstraint("email", name="uq_boarders_email"),
    )
    op.create_index("ix_boarders_room", "boarders", ["room_id"])

    op.create_table(
        "guardians",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "boarder_id",
            sa.String(length=20),
            sa.ForeignKey(
                "boarders.boarder_id",
                ondelete="CASCADE",
                name="fk_guardians_boarder_id_boarders",
            ),
            nullable=False,
        ),
        sa.Column("first_name", sa.String(length=120), nullable=False),
        sa.Column("last_name", sa.String(length=120), nullable=False),
        sa.Column("relationship_to_boarder", sa.String(length=60)),
        sa.Column("contact_number", sa.String(length=32)),
        sa.Column("address", sa.String(length=255)),
        *_timestamps(),
    )
    op.create_index("ix_guardians_boarder_id", "guardians", ["boarder_id"])

    op.create_table(
        "deposit_balances",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "boarder_id",
            sa.String(length=20),
            sa.ForeignKey(
                "boarders.boarder_id",
                ondelete="CASCADE",
                name="fk_deposit_balances_boarder_id_boarders",
            ),
            nullable=False,
        ),
        sa.Column("balance", sa.Numeric(12, 2), nullable=False, server_default="0"),
        *_timestamps(),
        sa.UniqueConstraint("boarder_id", name="uq_deposit_balances_boarder_id"),
        sa.CheckConstraint(
            "balance >= 0", name="ck_deposit_balances_balance_non_negative"
        ),
    )

    op.create_table(
        "payments",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "boarder_id",
            sa.String(length=20),
            sa.ForeignKey(
                "boarders.boarder_id", name="fk_payments_boarder_id_boarders"
            ),
            nullable=False,
        ),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("payment_method", sa.String(length=40), nullable=False),
        sa.Column("payment_type", sa.String(length=40), nullable=False),
        sa.Column("payment_date", sa.Date(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_payments_boarder", "payments", ["boarder_id"])
    op.create_index("ix_payments_date", "payments", ["payment_date"])

    op.create_table(
        "charges",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "boarder_id",
            sa.String(length=20),
            sa.ForeignKey("boarders.boarder_id", name="fk_charges_boarder_id_boarders"),
            nullable=False,
        ),
        sa.Column("description", sa.String(length=255), nullable=False),
        sa.Column("charge_type", sa.String(length=40), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("charge_date", sa.Date(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_charges_boarder", "charges", ["boarder_id"])
    op.create_index("ix_charges_date", "charges", ["charge_date"])

    booking_status_enum = sa.Enum(
        "PENDING", "CONFIRMED", "CANCELLED", name="bookingstatus"
    )
    op.create_table(
        "bookings",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "room_id",
            sa.String(length=20),
            sa.ForeignKey("rooms.room_id", name="fk_bookings_room_id_rooms"),
            nullable=False,
        ),
        sa.Column(
            "caretaker_id",
            sa.String(length=20),
            sa.ForeignKey(
                "caretakers.caretaker_id", name="fk_bookings_caretaker_id_caretakers"
            ),
        ),
        sa.Column(
            "employee_id",
            sa.String(length=20),
            sa.ForeignKey(
                "employees.employee_id", name="fk_bookings_employee_id_employees"
            ),
        ),
        sa.Column("first_name", sa.String(length=120), nullable=False),
        sa.Column("last_name", sa.String(length=120), nullable=False),
        sa.Column("contact_number", sa.String(length=32)),
        sa.Column("booking_date", sa.Date(), nullable=False),
        sa.Column("move_in_date", sa.Date()),
        sa.Column("status", booking_status_enum, nullable=False),
        *_timestamps(),
    )
    op.create_index(
        "ix_bookings_guest", "bookings", ["first_name", "last_name", "contact_number"]
    )


def downgrade() -> None:
    op.drop_index("ix_bookings_guest", table_name="bookings")
    op.drop_table("bookings")
    op.drop_index("ix_charges_date", table_name="charges")
    op.drop_index("ix_charges_boarder", table_name="charges")
    op.drop_table("charges")
    op.drop_index("ix_payments_date", table_name="payments")
    op.drop_index("ix_payments_boarder", table_name="payments")
    op.drop_table("payments")
    op.drop_table("deposit_balances")
    op.drop_index("ix_guardians_boarder_id", table_name="guardians")
    op.drop_table("guardians")
    op.drop_index("ix_boarders_room", table_name="boarders")
    op.drop_table("boarders")
    op.drop_index("ix_rooms_status", table_name="rooms")
    op.drop_table("rooms")
    op.drop_table("employees")
    op.drop_table("caretakers")
    op.drop_table("owners")
    sa.Enum(name="bookingstatus").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="roomstatus").drop(op.get_bind(), checkfirst=True)
