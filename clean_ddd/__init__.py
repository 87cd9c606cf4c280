"""clean_ddd - DDD building blocks with ordering, users and tasks contexts."""

__version__ = "0.1.0"
