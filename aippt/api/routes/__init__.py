"""Route modules for AIPPT."""
