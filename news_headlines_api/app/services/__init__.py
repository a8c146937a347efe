"""
Service layer.

The headline store encapsulates the collection and its business rules
so that API handlers only translate between HTTP and store calls.
"""
