"""Hardware backends reading and writing kernel control files."""
