"""Commands restricted to the bot owners."""
