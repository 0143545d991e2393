"""Email adapters - Console and Brevo implementations of EmailSender."""

from .brevo import BrevoEmailSender
from .console import ConsoleEmailSender

__all__ = ["BrevoEmailSender", "ConsoleEmailSender"]
