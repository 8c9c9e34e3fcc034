"""FastAPI adapter: app factory, routes and HTML components."""
