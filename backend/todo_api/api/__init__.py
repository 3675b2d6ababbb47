"""HTTP layer: routers and global error handlers."""
