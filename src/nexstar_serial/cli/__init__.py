"""Command-line interface for the NexStar serial client."""
