"""HTTP API for the company intelligence backend."""
