"""
Infrastructure layer.

Adapters for the ports the application layer declares:

- Identity Directory: SQLAlchemy ``users`` table, or an in-memory store
- Credential Hasher: pwdlib (argon2) with a configured pepper
- HTTP: FastAPI routers, request/response schemas and the
  header-credential dependency

Nothing in the domain or application layers imports from here.
"""
