"""Core building blocks: data structures, events, configuration and randomness."""
