"""Console front end: configuration and the interactive entry point."""
