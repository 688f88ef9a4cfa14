"""HTML escaping, template environment and the preview server."""
