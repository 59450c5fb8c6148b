"""Layout engine: text wrapping, page flow and section renderers."""
