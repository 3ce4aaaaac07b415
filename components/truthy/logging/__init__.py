from truthy.logging.core import get_logger

__all__ = ["get_logger"]
