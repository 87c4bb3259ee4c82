# Models package init
"""
Contact Book Backend — ORM Models
==================================

What:  SQLAlchemy models mapping database tables to Python classes.

Model Inventory:
    - contact.py: Contact → `address_contact` table
"""
