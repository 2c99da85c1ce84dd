"""Problem details (RFC 7807) error responses, their OpenAPI descriptions, and a small WSGI router."""

__version__ = "0.1.0"

__all__ = ["errors", "example", "problem", "wsgi"]