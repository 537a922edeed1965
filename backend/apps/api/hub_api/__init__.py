"""Student Hub feed API application."""
