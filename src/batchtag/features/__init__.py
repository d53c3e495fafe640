"""Feature slices: format strings, selection editing, and the music library."""
