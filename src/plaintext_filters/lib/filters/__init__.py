"""Filter definitions and the registry they self-register into."""
