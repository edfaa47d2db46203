"""Base layer: errors, logging, configuration DTOs, interfaces and the plugin system."""
