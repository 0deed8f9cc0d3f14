"""Host-specific adapters."""
