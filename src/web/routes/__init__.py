"""Routes JSON de l'API OrderDesk."""
