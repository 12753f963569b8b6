"""FastAPI surface of the messaging service."""
