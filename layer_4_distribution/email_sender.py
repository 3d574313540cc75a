"""
Email delivery of rendered brand kits via SMTP
Supports Gmail and other SMTP servers (STARTTLS or SSL on port 465)
"""
import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from datetime import datetime
from typing import Optional, Dict, Any

from config.settings import Settings, settings as default_settings
from models.intake import Intake
from utils.logger import get_logger

logger = get_logger(__name__)

SSL_PORT = 465


def build_subject(intake: Intake) -> str:
    """Subject line for a brand kit email"""
    return f"Brand Kit - {intake.business_name or 'New Submission'}"


class EmailSender:
    """Send brand kit emails via SMTP"""

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize email sender

        Args:
            settings: Configuration (uses the global settings if not provided)
        """
        settings = settings or default_settings
        self.smtp_server = settings.SMTP_SERVER
        self.smtp_port = settings.SMTP_PORT
        self.smtp_username = settings.SMTP_USERNAME
        self.smtp_password = settings.SMTP_PASSWORD
        self.from_email = settings.FROM_EMAIL
        self.to_email = settings.TO_EMAIL
        self.use_tls = settings.SMTP_USE_TLS

        if self.smtp_server == "smtp.gmail.com" and self.smtp_username and not self.smtp_password:
            logger.warning("Gmail requires an App Password (not your regular password).")

    @property
    def is_configured(self) -> bool:
        """True when there is a server to talk to and a recipient"""
        return bool(self.smtp_server and self.to_email)

    def _connect(self) -> smtplib.SMTP:
        if self.smtp_port == SSL_PORT:
            return smtplib.SMTP_SSL(self.smtp_server, self.smtp_port)
        return smtplib.SMTP(self.smtp_server, self.smtp_port)

    def send_email(self, subject: str, html_body: str,
                   to_email: Optional[str] = None,
                   from_email: Optional[str] = None) -> Dict[str, Any]:
        """
        Send an HTML email via SMTP

        Args:
            subject: Email subject
            html_body: Rendered brand kit HTML
            to_email: Recipient email (uses default if not provided)
            from_email: Sender email (uses default if not provided)

        Returns:
            Dictionary with send status and metadata. Never raises.
        """
        to_email = to_email or self.to_email
        from_email = from_email or self.from_email

        if not to_email:
            error_msg = "No recipient email configured"
            logger.error(error_msg)
            return {
                "success": False,
                "error": error_msg,
                "timestamp": datetime.now().isoformat()
            }

        if not self.smtp_server:
            error_msg = "SMTP server not configured"
            logger.error(error_msg)
            return {
                "success": False,
                "error": error_msg,
                "timestamp": datetime.now().isoformat()
            }

        try:
            logger.info(f"Sending brand kit email to {to_email}")

            msg = MIMEMultipart('alternative')
            msg['From'] = from_email
            msg['To'] = to_email
            msg['Subject'] = subject
            msg.attach(MIMEText(html_body, 'html', 'utf-8'))

            with self._connect() as server:
                if self.use_tls and self.smtp_port != SSL_PORT:
                    server.starttls()

                # Relays without auth are allowed; only log in with both values
                if self.smtp_username and self.smtp_password:
                    server.login(self.smtp_username, self.smtp_password)
                server.send_message(msg)

            logger.info(f"Email sent successfully to {to_email}")

            return {
                "success": True,
                "to": to_email,
                "from": from_email,
                "subject": subject,
                "timestamp": datetime.now().isoformat()
            }

        except smtplib.SMTPAuthenticationError as e:
            error_msg = f"SMTP authentication failed: {e}"
            logger.error(error_msg)
            if self.smtp_server == "smtp.gmail.com":
                logger.error("Gmail authentication failed. Use an App Password: https://myaccount.google.com/apppasswords")
            return {
                "success": False,
                "error": error_msg,
                "timestamp": datetime.now().isoformat()
            }
        except smtplib.SMTPException as e:
            error_msg = f"SMTP error: {e}"
            logger.error(error_msg)
            return {
                "success": False,
                "error": error_msg,
                "timestamp": datetime.now().isoformat()
            }
        except Exception as e:
            error_msg = f"Unexpected error sending email: {e}"
            logger.error(error_msg, exc_info=True)
            return {
                "success": False,
                "error": error_msg,
                "timestamp": datetime.now().isoformat()
            }

    def send_brand_kit(self, intake: Intake, html_body: str) -> Dict[str, Any]:
        """Send the rendered kit for an intake with the standard subject"""
        result = self.send_email(build_subject(intake), html_body)
        self.log_send_status(intake.business_name or "unnamed business", result)
        return result

    def log_send_status(self, label: str, result: Dict[str, Any]):
        """
        Log email send status for traceability

        Args:
            label: What the email was for (business name)
            result: Send result dictionary
        """
        if result.get("success"):
            logger.info(f"Brand kit email sent for {label}:")
            logger.info(f"  To: {result.get('to')}")
            logger.info(f"  Subject: {result.get('subject')}")
            logger.info(f"  Timestamp: {result.get('timestamp')}")
        else:
            logger.error(f"Brand kit email failed for {label}: {result.get('error')}")
