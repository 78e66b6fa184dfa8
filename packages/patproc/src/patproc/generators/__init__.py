"""One module per generator kind; each exposes a module-level `GEN`."""
