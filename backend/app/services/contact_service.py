"""
Contact Book Backend — Contact Service (Data Access Layer)
============================================================

What:  The five storage operations of the API: create, list, get_by_id,
       update, delete.
Why:   Keeps SQL out of the route handlers; routes only map results and
       failures onto HTTP.
How:   Builds parameterized SQLAlchemy statements against `address_contact`
       and executes them on the request's AsyncSession.
Who:   Called by route handlers in app/routes/contacts.py.

Statements issued (all values are bound parameters):
    create     INSERT INTO address_contact (name, address, email) VALUES (...)
    list       SELECT id, name, address, email FROM address_contact
    get_by_id  SELECT ... FROM address_contact WHERE id = :id LIMIT 1
    update     UPDATE address_contact SET name, address, email WHERE id = :id
    delete     DELETE FROM address_contact WHERE id = :id

Error Handling Strategy:
    Any exception from the driver or SQLAlchemy is logged with its type and
    wrapped in DatabaseError so that no internal detail reaches the client.
    Writes commit inside the operation, so a failed commit surfaces as a
    DatabaseError before the route answers.
    A missing row is not an error: get_by_id returns None, and update/delete
    affect zero rows silently.

Design Decision:
    ContactService is stateless — it receives the db session for each call.
    The session (and through it the shared engine pool) is the only resource.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError
from app.models.contact import Contact
from app.schemas.contact import ContactCreate, ContactResponse

logger = logging.getLogger(__name__)


class ContactService:
    """
    Data access for the Contact entity.

    Every method returns pydantic response models rather than ORM objects so
    callers never hold rows attached to a session.
    """

    async def create(self, db: AsyncSession, contact: ContactCreate) -> ContactResponse:
        """
        Insert a contact and return it with its generated id.

        Args:
            db: Async database session (injected by FastAPI)
            contact: Fields to insert; any client-supplied id is never read

        Raises:
            DatabaseError: The insert, the id retrieval or the commit failed
        """
        try:
            row = Contact(name=contact.name, address=contact.address, email=contact.email)
            db.add(row)
            await db.flush()  # Emits the INSERT and fetches the auto-increment id
            created = ContactResponse.model_validate(row)
            await db.commit()
            logger.info("Contact created: %s", created.id)
            return created
        except Exception as e:
            logger.error("Database error creating contact: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the contact.",
                context={"operation": "create", "error_type": type(e).__name__},
            )

    async def list(self, db: AsyncSession) -> List[ContactResponse]:
        """
        Return every contact in storage order.

        No ORDER BY is applied; the row order is whatever the engine returns.
        An empty table yields an empty list.
        """
        try:
            result = await db.execute(select(Contact))
            return [ContactResponse.model_validate(row) for row in result.scalars().all()]
        except Exception as e:
            logger.error("Database error listing contacts: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve contacts.",
                context={"operation": "list", "error_type": type(e).__name__},
            )

    async def get_by_id(self, db: AsyncSession, contact_id: int) -> Optional[ContactResponse]:
        """
        Fetch one contact by primary key.

        Returns:
            The contact, or None when no row matches (the not-found marker).

        Raises:
            DatabaseError: Query execution failed
        """
        try:
            result = await db.execute(
                select(Contact).where(Contact.id == contact_id).limit(1)
            )
            row = result.scalar_one_or_none()
        except Exception as e:
            logger.error("Database error fetching contact %s: %s", contact_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the contact.",
                context={"operation": "get_by_id", "contact_id": contact_id,
                         "error_type": type(e).__name__},
            )

        if row is None:
            return None
        return ContactResponse.model_validate(row)

    async def update(self, db: AsyncSession, contact: ContactResponse) -> None:
        """
        Overwrite name, address and email of the row matching `contact.id`.

        All three fields are written unconditionally. Zero matching rows is a
        silent no-op; callers check existence first.
        """
        try:
            await db.execute(
                update(Contact)
                .where(Contact.id == contact.id)
                .values(name=contact.name, address=contact.address, email=contact.email)
                .execution_options(synchronize_session=False)
            )
            await db.commit()
            logger.info("Contact updated: %s", contact.id)
        except Exception as e:
            logger.error("Database error updating contact %s: %s", contact.id, str(e))
            raise DatabaseError(
                message="Could not update the contact.",
                context={"operation": "update", "contact_id": contact.id,
                         "error_type": type(e).__name__},
            )

    async def delete(self, db: AsyncSession, contact: ContactResponse) -> None:
        """
        Hard-delete the row matching `contact.id`.

        Zero matching rows is a silent no-op, as with update().
        """
        try:
            await db.execute(
                delete(Contact)
                .where(Contact.id == contact.id)
                .execution_options(synchronize_session=False)
            )
            await db.commit()
            logger.info("Contact deleted: %s", contact.id)
        except Exception as e:
            logger.error("Database error deleting contact %s: %s", contact.id, str(e))
            raise DatabaseError(
                message="Could not delete the contact.",
                context={"operation": "delete", "contact_id": contact.id,
                         "error_type": type(e).__name__},
            )


# ── Singleton Instance ────────────────────────────────────────────────────
contact_service = ContactService()
