"""Django config package for the triatapp project."""
