"""HTTP blueprints: health, auth, content and shared brains."""
