"""API endpoint modules. Each exposes a module-level router."""
