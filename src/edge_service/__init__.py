"""Edge service: validates a CEP and asks the weather service for its temperature."""

__version__ = "0.1.0"
