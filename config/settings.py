"""
Application settings and configuration

This file contains all the settings for the brand kit service.
Think of it like a control panel where you can adjust how the system works.

Most settings can be changed by creating a .env file in the project root.
If a setting isn't in .env, it uses the default value shown here.
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file (if it exists)
# This lets you configure the app without changing code
load_dotenv()


class Settings:
    """
    Application configuration settings

    Values are read when the instance is created, so a fresh Settings()
    picks up whatever the environment holds at that moment.
    """

    def __init__(self):
        # ============================================================
        # Gemini API Settings
        # ============================================================
        # Google's Gemini AI writes the brand kit (taglines, palette, videos...)
        # Leave the key empty to always use the built-in fallback kit
        self.GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
        self.GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
        # Options: gemini-1.5-flash (fast, cheap), gemini-1.5-pro (slower, smarter)
        self.GENERATION_TEMPERATURE = float(os.getenv("GENERATION_TEMPERATURE", "0.7"))
        self.GENERATION_TIMEOUT = float(os.getenv("GENERATION_TIMEOUT", "30"))  # Seconds per call

        # ============================================================
        # Logging Settings
        # ============================================================
        # Options: DEBUG (very detailed), INFO (normal), WARNING (only problems), ERROR (only errors)
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
        self.LOG_FILE = os.getenv("LOG_FILE", "logs/app.log")  # Empty string disables the file log

        # ============================================================
        # Email Settings
        # ============================================================
        # Email is only sent when both SMTP_SERVER and TO_EMAIL are set
        # Port 465 uses SSL from the start; other ports upgrade with STARTTLS
        self.SMTP_SERVER = os.getenv("SMTP_SERVER", "")
        self.SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))
        self.SMTP_USERNAME = os.getenv("SMTP_USERNAME", "")
        self.SMTP_PASSWORD = os.getenv("SMTP_PASSWORD", "")
        self.FROM_EMAIL = os.getenv("FROM_EMAIL", "no-reply@brandkit.local")
        self.TO_EMAIL = os.getenv("TO_EMAIL", "")
        self.SMTP_USE_TLS = os.getenv("SMTP_USE_TLS", "true").lower() == "true"

        # ============================================================
        # Web Server Settings
        # ============================================================
        self.HOST = os.getenv("HOST", "127.0.0.1")
        self.PORT = int(os.getenv("PORT", "8000"))

    @property
    def has_generation_credential(self) -> bool:
        """True when an API key is configured for the AI-backed generator"""
        return bool(self.GEMINI_API_KEY)

    @property
    def has_smtp(self) -> bool:
        """True when there is both a mail server and someone to send to"""
        return bool(self.SMTP_SERVER and self.TO_EMAIL)


# Global settings instance
settings = Settings()
