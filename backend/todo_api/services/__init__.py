"""Services: imperative shell that runs core decisions against the store."""
