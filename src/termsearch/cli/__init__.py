"""Command-line interface for termsearch."""
