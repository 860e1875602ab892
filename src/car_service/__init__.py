"""Car-service pricing: a base service composed with priced add-ons."""
