"""Infrastructure layer - configuration, logging and collaborator adapters."""
