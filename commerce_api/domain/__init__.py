"""
Domain layer.

The domain layer holds the identity and credential rules of the service.
It has no dependencies on web frameworks or storage, and it never logs.

This layer contains:
- Value Objects: one self-validating type per user field
- Policies: cross-field password rules and display-name masking
- Aggregate Roots: the User consistency boundary
"""
