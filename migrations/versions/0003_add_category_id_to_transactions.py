"""add category_id foreign key to transactions

Revision ID: 0003_add_category_id_to_transactions
Revises: 0002_create_transactions
Create Date: 2020-08-26 11:18:01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0003_add_category_id_to_transactions"
down_revision: Union[str, Sequence[str], None] = "0002_create_transactions"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # batch mode: SQLite can't ALTER TABLE ... ADD CONSTRAINT
    with op.batch_alter_table("transactions") as batch_op:
        batch_op.add_column(sa.Column("category_id", sa.Uuid(), nullable=True))
        batch_op.create_foreign_key(
            "fk_transactions_category_id",
            "categories",
            ["category_id"],
            ["id"],
            onupdate="CASCADE",
            ondelete="SET NULL",
        )


def downgrade() -> None:
    """Downgrade schema."""
    with op.batch_alter_table("transactions") as batch_op:
        batch_op.drop_constraint("fk_transactions_category_id", type_="foreignkey")
        batch_op.drop_column("category_id")
