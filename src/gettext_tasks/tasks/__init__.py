"""Task pipeline and registry."""
