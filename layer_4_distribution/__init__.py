"""
Layer 4: Distribution
- Email Sender (SMTP/Gmail, HTML body, optional)
"""
from .email_sender import EmailSender, build_subject

__all__ = [
    'EmailSender',
    'build_subject',
]
