"""
Brand kit pipeline

Runs the 4 layers in order for one submission:
1. Normalize the raw intake
2. Generate the brand kit (AI if a key is configured, else fallback)
3. Render it as HTML
4. Email it (only when SMTP is configured)

Generation and email failures never fail the run; they lower quality
(fallback kit, emailed=False). Anything else propagates to the caller.
"""
from typing import Any, Dict, Optional

from config.settings import Settings, settings as default_settings
from layer_1_intake.normalizer import normalize_intake
from layer_2_generation.brand_kit_generator import BrandKitGenerator
from layer_3_rendering.html_renderer import render_brand_kit_html
from layer_4_distribution.email_sender import EmailSender
from utils.logger import get_logger

logger = get_logger(__name__)


class BrandKitPipeline:
    """Intake in, brand kit + HTML (+ optional email) out"""

    def __init__(self,
                 settings: Optional[Settings] = None,
                 generator: Optional[BrandKitGenerator] = None,
                 email_sender: Optional[EmailSender] = None):
        """
        Initialize the pipeline with its configuration and collaborators

        Args:
            settings: Configuration (uses the global settings if not provided)
            generator: Brand kit generator (built from settings if not provided)
            email_sender: Email sender (built from settings if not provided)
        """
        self.settings = settings or default_settings
        self.generator = generator or BrandKitGenerator(settings=self.settings)
        self.email_sender = email_sender or EmailSender(settings=self.settings)

    def run(self, raw_intake: Any, send_email: Optional[bool] = None) -> Dict[str, Any]:
        """
        Process one submission

        Args:
            raw_intake: Parsed request body (any shape)
            send_email: True/False to force, None to send only when SMTP is configured

        Returns:
            {"ok": True, "html": ..., "result": <brand kit>, "emailed": bool}
        """
        intake = normalize_intake(raw_intake)

        brand_kit = self.generator.generate(intake)
        logger.info(f"Brand kit ready (source: {self.generator.last_source})")

        html_doc = render_brand_kit_html(brand_kit)

        if send_email is None:
            send_email = self.email_sender.is_configured

        emailed = False
        if send_email:
            send_result = self.email_sender.send_brand_kit(intake, html_doc)
            emailed = bool(send_result.get("success"))
        else:
            logger.info("Email delivery not configured; skipping")

        return {
            "ok": True,
            "html": html_doc,
            "result": brand_kit,
            "emailed": emailed,
        }
