"""coinfmt command line interface (Typer)."""
