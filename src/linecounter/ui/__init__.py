"""User interface layers for LineCounter."""
