"""Command-line front end for javainfo."""
