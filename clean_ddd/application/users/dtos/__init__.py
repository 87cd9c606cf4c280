"""Data Transfer Objects for user use cases."""

from .user_dto import UserDTO

__all__ = ["UserDTO"]
