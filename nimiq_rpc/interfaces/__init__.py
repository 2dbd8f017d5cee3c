"""Protocol interfaces for the node client."""
from .transport import Transport

__all__ = ["Transport"]
