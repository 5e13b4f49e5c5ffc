from app.api import resume_routes

__all__ = ["resume_routes"]
