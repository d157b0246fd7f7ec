"""
Name: ASGI Entrypoint (masterdata.main)

Responsibilities:
  - Re-export the FastAPI app for ASGI servers and tooling
  - Keep the import path stable for uvicorn (masterdata.main:app)

Notes/Constraints:
  - No configuration or IO lives here; wiring is in masterdata.api.main
"""

from masterdata.api.main import app

__all__ = ["app"]
