"""
Service layer abstraction.

A service encapsulates the request handling logic for a domain.  It
talks to storage only through the ``PetStorer`` interface, so
backends can be swapped without changing API handlers.
"""
