"""HTTP API for the tutor (FastAPI)."""

from linguatutor.api.app import create_app

__all__ = ["create_app"]
