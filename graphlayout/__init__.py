"""Graph model, force-directed layout, benchmarks and sample graph generators."""

__version__ = "0.1.0"