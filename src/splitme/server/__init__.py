"""ASGI plumbing, process lifecycle and the pounce server entry point."""
