"""API package - FastAPI application and routes."""
