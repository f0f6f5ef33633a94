"""Infrastructure — database sessions, logging, credential hashing, token signing."""
