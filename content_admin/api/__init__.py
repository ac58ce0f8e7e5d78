"""HTTP API for the content admin panel."""
