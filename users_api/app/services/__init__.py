"""
Service layer abstraction.

Services encapsulate the operations behind the API handlers.  The user
service keeps its records in memory; swapping the store for a database
would not change the handlers.
"""
