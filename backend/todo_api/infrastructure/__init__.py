"""Infrastructure: database session management, store adapters and logging setup."""
