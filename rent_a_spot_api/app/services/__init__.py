"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services talk
to the collections in ``core.store`` and raise the exceptions defined
in ``core.exceptions``; HTTP concerns stay in the API handlers.
"""
