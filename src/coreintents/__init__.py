"""Reusable catalogue of conversational intents with localized training sentences."""
