"""Fixed values shared across layers."""

HEALTH_STATUS = "healthy"
HEALTH_MESSAGE = "Library Inventory API is running"

CONFLICT_MESSAGE = "ISBN exists with different metadata"
