"""Generate HTTP handler scaffolding from an API discovery document."""
