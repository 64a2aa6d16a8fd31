# File: user_manager/db/schema.py

"""
Table definitions for the User Manager database.

The schema lives here, separate from the ORM classes, so that migrations
create exactly these objects and the entity in ``models/user.py`` only maps
onto them.
"""

from sqlalchemy import BigInteger, Column, Index, Integer, MetaData, String, Table, func

metadata = MetaData()

# SQLite only autoincrements an INTEGER PRIMARY KEY.
ID_TYPE = BigInteger().with_variant(Integer, "sqlite")
# Largest id a signed BIGINT column can hold.
MAX_ID = 2**63 - 1

NAME_MAX_LENGTH = 80
EMAIL_MAX_LENGTH = 180
# Ciphertext is longer than the 30 character plaintext limit.
PASSWORD_COLUMN_LENGTH = 255

users_table = Table(
    "users",
    metadata,
    Column("id", ID_TYPE, primary_key=True, autoincrement=True),
    Column("name", String(NAME_MAX_LENGTH), nullable=False),
    Column("email", String(EMAIL_MAX_LENGTH), nullable=False),
    Column("password", String(PASSWORD_COLUMN_LENGTH), nullable=False),
)

# Case-insensitive uniqueness on email.
users_email_lower_index = Index(
    "ix_users_email_lower",
    func.lower(users_table.c.email),
    unique=True,
)
