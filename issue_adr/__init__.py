"""Turn labeled issue-form issues into Architecture Decision Records."""

__version__ = "0.1.0"
