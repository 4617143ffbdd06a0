"""Application layer – use-case level services built on the kernel."""
