"""Textual front end: catalog grid, detail overlay and detail page."""
