"""HTTP routers for the speechify service."""
