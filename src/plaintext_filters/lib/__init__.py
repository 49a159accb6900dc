"""Core plaintext-filters library."""
