"""initial

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19

"""

from alembic import op
import sqlalchemy as sa

revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("username", sa.String(length=80), nullable=False, server_default=""),
        sa.Column("role", sa.String(length=30), nullable=False, server_default="admin"),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "registrations",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("first_name", sa.String(length=120), nullable=False),
        sa.Column("last_name", sa.String(length=120), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("phone", sa.String(length=40), nullable=False),
        sa.Column("destination", sa.String(length=120), nullable=False),
        sa.Column("departure_date", sa.String(length=10), nullable=False),
        sa.Column("return_date", sa.String(length=10), nullable=False),
        sa.Column("departure_on", sa.Date(), nullable=True),
        sa.Column("adults", sa.String(length=4), nullable=False, server_default="1"),
        sa.Column("children", sa.String(length=4), nullable=False, server_default="0"),
        sa.Column("room_type", sa.String(length=20), nullable=False, server_default="standard"),
        sa.Column("meal_preference", sa.String(length=20), nullable=False, server_default="vegetarian"),
        sa.Column("special_requests", sa.Text(), nullable=False, server_default=""),
        sa.Column("emergency_name", sa.String(length=200), nullable=False),
        sa.Column("emergency_phone", sa.String(length=40), nullable=False),
        sa.Column("emergency_relation", sa.String(length=80), nullable=False),
        sa.Column("street_address", sa.String(length=255), nullable=False),
        sa.Column("city", sa.String(length=120), nullable=False),
        sa.Column("state_province", sa.String(length=120), nullable=False),
        sa.Column("postal_code", sa.String(length=20), nullable=False),
        sa.Column("country", sa.String(length=120), nullable=False),
        sa.Column("terms_accepted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_registrations_email", "registrations", ["email"], unique=False)
    op.create_index("ix_registrations_destination", "registrations", ["destination"], unique=False)
    op.create_index("ix_registrations_departure_on", "registrations", ["departure_on"], unique=False)
    op.create_index("ix_registrations_created_at", "registrations", ["created_at"], unique=False)

    op.create_table(
        "contact_messages",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("subject", sa.String(length=255), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("status", sa.String(length=16), nullable=False, server_default="new"),
        sa.Column("admin_notes", sa.Text(), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_contact_messages_email", "contact_messages", ["email"], unique=False)
    op.create_index("ix_contact_messages_status", "contact_messages", ["status"], unique=False)
    op.create_index("ix_contact_messages_created_at", "contact_messages", ["created_at"], unique=False)

    op.create_table(
        "email_logs",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("to_email", sa.String(length=320), nullable=False),
        sa.Column("subject", sa.String(length=255), nullable=False),
        sa.Column("body", sa.Text(), nullable=True),
        sa.Column("content_type", sa.String(length=20), nullable=False, server_default="text/html"),
        sa.Column("status", sa.String(length=30), nullable=False, server_default="queued"),
        sa.Column("related_contact_id", sa.String(length=36), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("sent_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_email_logs_to_email", "email_logs", ["to_email"], unique=False)


def downgrade() -> None:
    op.drop_table("email_logs")
    op.drop_table("contact_messages")
    op.drop_table("registrations")
    op.drop_table("users")
