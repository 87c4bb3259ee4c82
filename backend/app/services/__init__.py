# Services package init
"""
Contact Book Backend — Services Layer
=======================================

What:  Data access sitting between routes (HTTP) and the database.

Service Inventory:
    - ContactService: create / list / get_by_id / update / delete against
      the address_contact table
"""
