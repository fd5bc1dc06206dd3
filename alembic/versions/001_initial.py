"""Initial schema: users, genres, vinyls, orders, favorites

Revision ID: 001
Revises:
Create Date: 2025-03-02

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

user_role = sa.Enum("user", "admin", name="user_role")
vinyl_condition = sa.Enum(
    "Mint", "Near Mint", "Excellent", "Very Good Plus", "Very Good", "Good", "Fair", "Poor",
    name="vinyl_condition",
)
order_status = sa.Enum("pending", "paid", "shipped", "completed", "cancelled", name="order_status")


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("hashed_password", sa.String(255), nullable=False),
        sa.Column("profile_image", sa.String(500), nullable=True),
        sa.Column("address", sa.String(500), nullable=True),
        sa.Column("role", user_role, nullable=False, server_default="user"),
        sa.Column("registration_date", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "genres",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_genres_name", "genres", ["name"], unique=True)

    op.create_table(
        "vinyls",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("artist", sa.String(255), nullable=False),
        sa.Column("release_year", sa.Integer(), nullable=True),
        sa.Column("condition", vinyl_condition, nullable=False, server_default="Good"),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("cover_image_url", sa.String(500), nullable=True),
        sa.Column("seller_id", sa.Uuid(), nullable=False),
        sa.Column("genre_id", sa.Uuid(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.CheckConstraint("price >= 0", name="ck_vinyls_price_non_negative"),
        sa.ForeignKeyConstraint(["seller_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["genre_id"], ["genres.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_vinyls_title", "vinyls", ["title"], unique=False)
    op.create_index("ix_vinyls_artist", "vinyls", ["artist"], unique=False)
    op.create_index("ix_vinyls_seller_id", "vinyls", ["seller_id"], unique=False)
    op.create_index("ix_vinyls_genre_id", "vinyls", ["genre_id"], unique=False)

    # vinyl_id has no foreign key: orders outlive removed listings
    op.create_table(
        "orders",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("status", order_status, nullable=False, server_default="pending"),
        sa.Column("order_date", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("buyer_id", sa.Uuid(), nullable=False),
        sa.Column("seller_id", sa.Uuid(), nullable=False),
        sa.Column("vinyl_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["buyer_id"], ["users.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["seller_id"], ["users.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_orders_order_date", "orders", ["order_date"], unique=False)
    op.create_index("ix_orders_buyer_id", "orders", ["buyer_id"], unique=False)
    op.create_index("ix_orders_seller_id", "orders", ["seller_id"], unique=False)
    op.create_index("ix_orders_vinyl_id", "orders", ["vinyl_id"], unique=False)

    op.create_table(
        "user_favorites",
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("vinyl_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["vinyl_id"], ["vinyls.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id", "vinyl_id"),
    )


def downgrade() -> None:
    op.drop_table("user_favorites")
    op.drop_index("ix_orders_vinyl_id", "orders")
    op.drop_index("ix_orders_seller_id", "orders")
    op.drop_index("ix_orders_buyer_id", "orders")
    op.drop_index("ix_orders_order_date", "orders")
    op.drop_table("orders")
    op.drop_index("ix_vinyls_genre_id", "vinyls")
    op.drop_index("ix_vinyls_seller_id", "vinyls")
    op.drop_index("ix_vinyls_artist", "vinyls")
    op.drop_index("ix_vinyls_title", "vinyls")
    op.drop_table("vinyls")
    op.drop_index("ix_genres_name", "genres")
    op.drop_table("genres")
    op.drop_index("ix_users_email", "users")
    op.drop_table("users")
    order_status.drop(op.get_bind(), checkfirst=True)
    vinyl_condition.drop(op.get_bind(), checkfirst=True)
    user_role.drop(op.get_bind(), checkfirst=True)
