# Services package init
"""
Sikkim Tourism Backend — Services Layer
=========================================

What:  Storage operations behind each endpoint, independent of HTTP.
How:   Services receive an AsyncSession per call and return Pydantic records
       or raise application exceptions. Each has a module-level singleton.

Service Inventory:
    - DestinationService: list, get by id, create
    - BookingService: create, list (joined with destination name), delete
    - ContactService: create, list
"""
