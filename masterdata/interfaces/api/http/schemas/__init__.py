"""
===============================================================================
CRC CARD — schemas/__init__.py
===============================================================================

Module:
    HTTP schemas package (pydantic DTOs)

Responsibilities:
    - Group HTTP contracts per entity (users/facilities).
    - Keep DTOs (schemas) apart from controllers (routers).

Rules:
    - Schemas do NOT import infrastructure.
    - Schemas do NOT run use cases.
    - Only types and input/output shapes; business rules live in
      application.validation.
===============================================================================
"""

__all__ = []
