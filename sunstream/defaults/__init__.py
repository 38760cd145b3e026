"""Default constants and configuration values for sunstream."""

from .config import DEFAULT_ENGINE_CONFIG
from .vocabulary import DETAIL_CATEGORY, PARIS_ZONES, QUERY_TYPES, TERRASSES

__all__ = ["DEFAULT_ENGINE_CONFIG", "DETAIL_CATEGORY", "PARIS_ZONES", "QUERY_TYPES", "TERRASSES"]
