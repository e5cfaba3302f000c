"""Todo management service: in-memory storage, HTTP API and client."""

__version__ = "1.0.0"
