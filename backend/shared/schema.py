"""
Relational schema for the Catalog backend.

SQLAlchemy Core table definitions shared by the repositories and the
init_db.py script. Column names follow the production MySQL tables.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    false,
)
from sqlalchemy.dialects import mysql

metadata = MetaData()

# Email lookups and the unique index compare case-sensitively. MySQL's
# default collation does not, so the column is pinned to a binary one.
EMAIL_TYPE = String(255).with_variant(mysql.VARCHAR(255, collation="utf8mb4_bin"), "mysql")


users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("email", EMAIL_TYPE, nullable=False, unique=True),
    Column("password", String(255), nullable=False),  # bcrypt digest
)


products_table = Table(
    "products",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("price", Numeric(10, 2, asdecimal=False), nullable=False),
    Column("quantity", Integer, nullable=False),
    Column("amount", Numeric(12, 2, asdecimal=False), nullable=False),
    Column("deleted_flag", Boolean, nullable=False, server_default=false()),
)
