"""unique category titles

Revision ID: 0004_unique_category_title
Revises: 0003_add_category_id_to_transactions
Create Date: 2020-08-27 09:40:12

"""
from typing import Sequence, Union

from alembic import op


# revision identifiers, used by Alembic.
revision: str = "0004_unique_category_title"
down_revision: Union[str, Sequence[str], None] = "0003_add_category_id_to_transactions"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    with op.batch_alter_table("categories") as batch_op:
        batch_op.create_unique_constraint("uq_categories_title", ["title"])


def downgrade() -> None:
    """Downgrade schema."""
    with op.batch_alter_table("categories") as batch_op:
        batch_op.drop_constraint("uq_categories_title", type_="unique")
