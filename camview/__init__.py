"""2D pan/zoom viewport camera and its input handling."""
