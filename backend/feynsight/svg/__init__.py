"""SVG assembly and inspection."""
