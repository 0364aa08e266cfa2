"""Initial schema (pantry, shopping, recipes, planner)

Revision ID: 0001_initial
Revises: 
Create Date: 2026-10-19
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "pantry_items",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("available", sa.Boolean(), nullable=False, server_default=sa.text("1")),
    )
    op.create_index("ix_pantry_items_available", "pantry_items", ["available"], unique=False)

    op.create_table(
        "shopping_items",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=200), nullable=False),
    )

    op.create_table(
        "recipes",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=300), nullable=False),
        sa.Column("category", sa.String(length=120), nullable=False, server_default=""),
        sa.Column("ingredients", sa.JSON(), nullable=False),
        sa.Column("instructions", sa.Text(), nullable=False, server_default=""),
        sa.Column("created", sa.DateTime(), nullable=False),
        sqlite_autoincrement=True,
    )

    op.create_table(
        "planned_meals",
        sa.Column("slot", sa.String(length=40), primary_key=True),
        sa.Column("recipe_id", sa.Integer(), nullable=False),
    )
    op.create_index("ix_planned_meals_recipe_id", "planned_meals", ["recipe_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_planned_meals_recipe_id", table_name="planned_meals")
    op.drop_table("planned_meals")

    op.drop_table("recipes")
    op.drop_table("shopping_items")

    op.drop_index("ix_pantry_items_available", table_name="pantry_items")
    op.drop_table("pantry_items")
