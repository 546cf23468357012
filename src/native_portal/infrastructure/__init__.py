"""Infrastructure adapters: database, session storage, credentials, logging."""
