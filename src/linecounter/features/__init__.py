"""Feature packages for LineCounter."""
