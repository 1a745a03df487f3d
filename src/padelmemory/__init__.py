"""Padel Memory: a pairs game for one to four players."""
