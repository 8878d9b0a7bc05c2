"""Infrastructure layer: persistence, mail, password hashing and the HTTP API."""
