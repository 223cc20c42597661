"""User account storage and the shared outbound HTTP client."""
