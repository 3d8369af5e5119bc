"""Version 1 of the Secret Santa API."""
