"""Static validation for CI/CD pipeline resource manifests."""

__version__ = "0.1.0"
