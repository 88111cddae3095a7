"""Static consistency checks between icon references and icon asset files."""
