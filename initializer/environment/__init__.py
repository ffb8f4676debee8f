"""Template bindings sourced from the environment."""
