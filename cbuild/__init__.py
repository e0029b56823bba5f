"""cbuild: resolve declarative C build targets into a compiler invocation and run it."""
