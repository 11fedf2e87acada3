"""Static reference tables served by the tools."""
