"""CLI subcommands for chartkeeper."""
