"""
Application layer.

The application layer sequences domain operations and collaborator calls.
It owns no business rules of its own.

This layer contains:
- Commands and Queries: raw client input for one operation
- Use Cases: handlers that orchestrate the User aggregate
- DTOs: UserInfo, the outward view of a user
- Protocols: the Identity Directory and Credential Hasher ports
"""
