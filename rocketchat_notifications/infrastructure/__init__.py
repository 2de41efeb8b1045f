"""Infrastructure layer - HTTP client, notification channel and wiring."""
