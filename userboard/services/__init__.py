# Services package init
"""
UserBoard Backend — Services Layer
====================================

What:  Seam between routes (HTTP) and repositories (storage).
How:   Services accept pydantic transfer structures, call the repository,
       and return pydantic responses. They hold no state of their own.

Service Inventory:
    - UserService: list / create / delete delegation to a UserRepository
"""
