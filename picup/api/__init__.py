"""picup API: one domain package per command group."""
