"""Pure calculation logic behind the API."""
