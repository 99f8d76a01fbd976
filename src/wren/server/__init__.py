"""Request pipeline — dispatch loop, error responses, ASGI sending."""
