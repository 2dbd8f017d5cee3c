"""Transport implementations."""
from .http import HttpTransport

__all__ = ["HttpTransport"]
