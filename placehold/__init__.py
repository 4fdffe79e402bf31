"""placehold — SVG placeholder images over HTTP."""
