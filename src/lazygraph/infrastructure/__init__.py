"""Infrastructure: bridges between lazy graphs and eager structures."""
