"""
Infrastructure layer: PostgreSQL pool and repository implementations.

Import concrete classes from `infrastructure.repositories` or
`infrastructure.db`; this package has no side effects.
"""
