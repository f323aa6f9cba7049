"""Message lifecycle service: domain core, handlers and adapters."""
