"""Client-side request construction for a JSON-over-HTTP JMX agent."""
