"""create budgets and transactions

Revision ID: 001
Revises: 
Create Date: 2026-10-19 09:00:00
"""

from alembic import op
import sqlalchemy as sa

revision = "001"
down_revision = None
branch_labels = None
depends_on = None

recurrence = sa.Enum("none", "daily", "weekly", "monthly", "yearly", name="recurrence")


def upgrade() -> None:
    op.create_table(
        "budgets",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("category", sa.String(100), nullable=True),
        sa.Column("icon", sa.String(50), nullable=True),
        sa.Column("created_by", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_budgets_created_by", "budgets", ["created_by"])

    op.create_table(
        "transactions",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("budget_id", sa.String(36), sa.ForeignKey("budgets.id"), nullable=False),
        sa.Column("category", sa.String(100), nullable=True),
        sa.Column("recurring", recurrence, nullable=False, server_default="none"),
        sa.Column("next_due_date", sa.DateTime(), nullable=True),
        sa.Column("last_reminder_sent", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_transactions_created_at", "transactions", ["created_at"])
    op.create_index("idx_transaction_budget", "transactions", ["budget_id"])
    op.create_index("idx_transaction_next_due", "transactions", ["recurring", "next_due_date"])


def downgrade() -> None:
    op.drop_index("idx_transaction_next_due", table_name="transactions")
    op.drop_index("idx_transaction_budget", table_name="transactions")
    op.drop_index("ix_transactions_created_at", table_name="transactions")
    op.drop_table("transactions")
    op.drop_index("ix_budgets_created_by", table_name="budgets")
    op.drop_table("budgets")
    recurrence.drop(op.get_bind(), checkfirst=True)
