"""Fountain of Objects: a turn-based cavern crawl."""
