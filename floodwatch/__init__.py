"""Floodwatch: pump station status and river flood stage inference."""
