"""
Contact Book Backend — Contact SQLAlchemy Model
=================================================

What:  ORM model representing the pre-existing `address_contact` table.
Why:   Lets the service layer build parameterized statements from mapped
       columns instead of hand-written SQL strings.
Who:   Used by ContactService for CRUD operations.

Table contract:
    The application never creates or migrates this table. The model mirrors
    the columns the database already has:
        id       INT AUTO_INCREMENT PRIMARY KEY
        name     TEXT
        address  TEXT
        email    TEXT
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Contact(Base):
    """
    A single address-book entry.

    Lifecycle:
        1. Inserted by POST /api/v1/contacts (storage assigns the id)
        2. Read any number of times
        3. Overwritten in place by PUT (name, address, email)
        4. Hard-deleted by DELETE
    """

    __tablename__ = "address_contact"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, default="")
    address: Mapped[str] = mapped_column(Text, nullable=False, default="")
    email: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def __repr__(self) -> str:
        return f"<Contact(id={self.id}, name='{self.name}')>"
