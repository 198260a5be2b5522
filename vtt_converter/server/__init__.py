"""HTTP service for browser and API clients.

WHY: The converter started life as a browser page; the service keeps that
workflow (pick files, convert, download one by one or as a ZIP) while
also exposing a JSON API for scripts.

HOW: app.py holds the FastAPI application and routes, models.py the
Pydantic response schemas.
"""
