"""Service layer for API consumers."""

from .services import Notification, PracticeService

__all__ = ['PracticeService', 'Notification']
