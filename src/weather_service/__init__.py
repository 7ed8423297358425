"""Weather service: resolves a CEP to a locality and reports its current temperature."""

__version__ = "0.1.0"
