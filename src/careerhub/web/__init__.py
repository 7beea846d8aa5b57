"""FastAPI web API for CareerHub."""
