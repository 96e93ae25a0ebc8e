"""Product catalog Web API: controller, service and repository layers over SQLite."""

__version__ = "1.0.0"
