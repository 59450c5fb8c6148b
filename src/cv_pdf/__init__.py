"""Resume PDF exporter: layout, pagination and link annotations."""

__version__ = "0.1.0"
