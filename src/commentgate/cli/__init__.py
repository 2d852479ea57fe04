"""commentgate command-line interface."""
