"""Infrastructure adapters for Google Sheets, quotes, settings, and logging."""
