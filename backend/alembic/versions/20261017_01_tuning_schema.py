"""tuning schema: catalog, profiles, grind and grinder logs

Revision ID: 20261017_01
Revises: 
Create Date: 2026-10-17 12:40:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20261017_01"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _log_columns() -> list[sa.Column]:
    return [
        sa.Column("setting", sa.Float(), nullable=False),
        sa.Column("outcome", sa.Text(), nullable=False),
        sa.Column("adjustment", sa.String(length=10), nullable=False),
        sa.Column("grams", sa.Float(), nullable=False),
        sa.Column("tamped", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "roasters",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=140), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "grinders",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=140), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "brew_methods",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=140), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "beans",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=140), nullable=False),
        sa.Column("roaster_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["roaster_id"], ["roasters.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_beans_roaster_id"), "beans", ["roaster_id"], unique=False)

    op.create_table(
        "profiles",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("bean_id", sa.Uuid(), nullable=False),
        sa.Column("grinder_id", sa.Uuid(), nullable=False),
        sa.Column("brew_method_id", sa.Uuid(), nullable=False),
        sa.Column("profile_setting", sa.Float(), nullable=False),
        sa.Column("grams", sa.Float(), nullable=False),
        sa.Column("tamped", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(["bean_id"], ["beans.id"]),
        sa.ForeignKeyConstraint(["grinder_id"], ["grinders.id"]),
        sa.ForeignKeyConstraint(["brew_method_id"], ["brew_methods.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("bean_id", "grinder_id", "brew_method_id", name="profiles_bean_id_grinder_id_brew_method_id_key"),
    )

    op.create_table(
        "grind_logs",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("profile_id", sa.Uuid(), nullable=False),
        *_log_columns(),
        sa.ForeignKeyConstraint(["profile_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_grind_logs_profile_id"), "grind_logs", ["profile_id"], unique=False)
    op.create_index(op.f("ix_grind_logs_created_at"), "grind_logs", ["created_at"], unique=False)

    op.create_table(
        "grinder_logs",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("grinder_id", sa.Uuid(), nullable=False),
        *_log_columns(),
        sa.ForeignKeyConstraint(["grinder_id"], ["grinders.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_grinder_logs_grinder_id"), "grinder_logs", ["grinder_id"], unique=False)
    op.create_index(op.f("ix_grinder_logs_created_at"), "grinder_logs", ["created_at"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_grinder_logs_created_at"), table_name="grinder_logs")
    op.drop_index(op.f("ix_grinder_logs_grinder_id"), table_name="grinder_logs")
    op.drop_table("grinder_logs")
    op.drop_index(op.f("ix_grind_logs_created_at"), table_name="grind_logs")
    op.drop_index(op.f("ix_grind_logs_profile_id"), table_name="grind_logs")
    op.drop_table("grind_logs")
    op.drop_table("profiles")
    op.drop_index(op.f("ix_beans_roaster_id"), table_name="beans")
    op.drop_table("beans")
    op.drop_table("brew_methods")
    op.drop_table("grinders")
    op.drop_table("roasters")
