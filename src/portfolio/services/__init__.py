"""Content rules shared by every content source."""
