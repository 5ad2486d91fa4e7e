"""
Service layer abstraction.

Services encapsulate access to the document store.  They are
constructed with the collection they operate on, so API handlers never
reach for a global client.
"""
