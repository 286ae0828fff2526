"""Infrastructure stubs for development and testing.

Available stubs:
- SequenceRandomSource: Scripted selection indices for deterministic tests

WARNING: These stubs are NOT for production use.
Production implementations are in src/infrastructure/adapters/.
"""

from src.infrastructure.stubs.sequence_random_source import SequenceRandomSource

__all__ = ["SequenceRandomSource"]
