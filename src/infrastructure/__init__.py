"""
Infrastructure layer - External adapters for task rotation.

This layer contains:
- The in-memory rotation store
- Production randomness and clock adapters
- Test stubs
- Observability (structlog configuration, correlation ids)

IMPORT RULES:
- CAN import from: domain, application
- Implements ports defined in application layer
"""
