"""Cross-cutting concerns: settings, logging, CORS and error handling."""
