"""Golf scorecard side games: scoring engine and service."""
