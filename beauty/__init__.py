"""HTTP service building blocks: routing, URLs, attributes, responses, timers, signals and Swagger."""

__version__ = "1.0.0"