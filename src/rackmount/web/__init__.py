"""REST API for rack-mount enclosure generation.

Run with:
    uvicorn rackmount.web:app --reload
"""

from rackmount.web.app import app, create_app

__all__ = ["app", "create_app"]
