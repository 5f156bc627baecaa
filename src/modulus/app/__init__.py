"""App layer: interactive prompts and the CLI entry point."""
