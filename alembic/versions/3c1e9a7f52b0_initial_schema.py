"""initial_schema

Revision ID: 3c1e9a7f52b0
Revises:
Create Date: 2026-10-18 09:00:00.000000
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "3c1e9a7f52b0"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _audit_columns() -> list[sa.Column]:
	return [
		sa.Column(
			"created_at",
			sa.DateTime(timezone=True),
			server_default=sa.text("now()"),
			nullable=False,
		),
		sa.Column(
			"updated_at",
			sa.DateTime(timezone=True),
			server_default=sa.text("now()"),
			nullable=False,
		),
	]


def upgrade() -> None:
	op.create_table(
		"crop_dataset",
		sa.Column(
			"id",
			postgresql.UUID(as_uuid=True),
			server_default=sa.text("gen_random_uuid()"),
			nullable=False,
		),
		sa.Column("ordinal", sa.Integer(), sa.Identity(always=False), nullable=False),
		sa.Column("crop_label", sa.String(length=100), nullable=False),
		sa.Column("temperature", sa.Float(), nullable=False),
		sa.Column("humidity", sa.Float(), nullable=False),
		sa.Column("ph", sa.Float(), nullable=False),
		sa.Column("rainfall", sa.Float(), nullable=False),
		sa.Column("nitrogen", sa.Float(), nullable=False),
		sa.Column("phosphorus", sa.Float(), nullable=False),
		sa.Column("potassium", sa.Float(), nullable=False),
		*_audit_columns(),
		sa.PrimaryKeyConstraint("id", name=op.f("pk_crop_dataset")),
	)
	op.create_index("ix_crop_dataset_label", "crop_dataset", ["crop_label"])

	op.create_table(
		"market_prices",
		sa.Column(
			"id",
			postgresql.UUID(as_uuid=True),
			server_default=sa.text("gen_random_uuid()"),
			nullable=False,
		),
		sa.Column("crop_name", sa.String(length=100), nullable=False),
		sa.Column("price_per_kg", sa.Float(), nullable=False),
		sa.Column("market_location", sa.String(length=255), nullable=False),
		sa.Column("price_date", sa.Date(), nullable=False),
		*_audit_columns(),
		sa.PrimaryKeyConstraint("id", name=op.f("pk_market_prices")),
	)
	op.create_index("ix_market_prices_date", "market_prices", ["price_date"])
	op.create_index("ix_market_prices_crop_date", "market_prices", ["crop_name", "price_date"])


def downgrade() -> None:
	op.drop_index("ix_market_prices_crop_date", table_name="market_prices")
	op.drop_index("ix_market_prices_date", table_name="market_prices")
	op.drop_table("market_prices")
	op.drop_index("ix_crop_dataset_label", table_name="crop_dataset")
	op.drop_table("crop_dataset")
