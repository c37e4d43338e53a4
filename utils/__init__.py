"""Console, configuration, logging and proxy helpers."""
