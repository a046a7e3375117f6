"""
Email Service using Gmail SMTP, with Resend as fallback
Templates are written in MJML (see email_templates.py) and compiled to HTML here
"""

import asyncio
import logging
import smtplib
import ssl
from datetime import datetime, timezone
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

import resend
from mjml import mjml_to_html

from .config import (
    EMAIL_FROM_ADDRESS,
    GMAIL_ADDRESS,
    GMAIL_APP_PASSWORD,
    RESEND_API_KEY,
    SMTP_HOST,
    SMTP_PORT,
)

logger = logging.getLogger(__name__)


class EmailDeliveryError(Exception):
    """Raised when no transport could deliver the message"""


def compile_mjml_to_html(mjml_content: str) -> str:
    """Compile MJML template to production-ready HTML"""
    try:
        result = mjml_to_html(mjml_content)
        # mjml_to_html returns a result with .html and .errors
        if result.errors:
            logger.warning(f"MJML compilation warnings: {result.errors}")
        return result.html
    except Exception as e:
        logger.error(f"MJML compilation error: {e}")
        raise Exception(f"Failed to compile MJML template: {str(e)}") from e


class EmailService:
    """Sends HTML email through SMTP when credentials are set, otherwise through Resend"""

    def __init__(
        self,
        smtp_host: str = SMTP_HOST,
        smtp_port: int = SMTP_PORT,
        username: Optional[str] = GMAIL_ADDRESS,
        password: Optional[str] = GMAIL_APP_PASSWORD,
        resend_api_key: Optional[str] = RESEND_API_KEY,
        from_address: str = EMAIL_FROM_ADDRESS,
    ):
        self.smtp_host = smtp_host
        self.smtp_port = smtp_port
        self.username = username
        self.password = password
        self.resend_api_key = resend_api_key
        self.from_address = from_address

        if self.resend_api_key:
            resend.api_key = self.resend_api_key

    def smtp_configured(self) -> bool:
        return bool(self.smtp_host and self.username and self.password)

    def _connect(self) -> smtplib.SMTP:
        if self.smtp_port == 465:
            context = ssl.create_default_context()
            server = smtplib.SMTP_SSL(self.smtp_host, self.smtp_port, context=context, timeout=30)
        else:
            server = smtplib.SMTP(self.smtp_host, self.smtp_port, timeout=30)
            server.starttls(context=ssl.create_default_context())
        server.login(self.username, self.password)
        return server

    def verify_connection(self) -> bool:
        """Log in to the SMTP server once to check the credentials"""
        if not self.smtp_configured():
            logger.warning("⚠️ SMTP credentials not set - confirmation emails use Resend or are skipped")
            return False
        try:
            server = self._connect()
            server.quit()
            logger.info("✅ SMTP connection successful. Server is ready to send emails.")
            return True
        except Exception as e:
            logger.error(f"❌ SMTP connection error: {e}")
            return False

    def send_via_smtp(self, to: str, subject: str, html_content: str) -> dict:
        """Send email via the configured SMTP server"""
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = self.from_address
        msg["To"] = to
        msg.attach(MIMEText(html_content, "html"))

        server = self._connect()
        try:
            server.sendmail(self.username, [to], msg.as_string())
        finally:
            server.quit()

        logger.info(f"✅ SMTP email sent successfully via {self.smtp_host}")
        return {"id": f"smtp-{datetime.now(timezone.utc).timestamp()}", "success": True}

    async def send(self, to: str, subject: str, html_content: str) -> dict:
        """
        Send an HTML email

        Args:
            to: Recipient email
            subject: Email subject line
            html_content: Compiled HTML body

        Returns:
            Send response dict

        Raises:
            EmailDeliveryError: Neither SMTP nor Resend delivered the message
        """
        if self.smtp_configured():
            try:
                logger.info(f"📧 Sending email via SMTP: {self.smtp_host}")
                return await asyncio.to_thread(self.send_via_smtp, to, subject, html_content)
            except Exception as e:
                if not self.resend_api_key:
                    logger.error(f"❌ SMTP send failed to {to}: {e}")
                    raise EmailDeliveryError(f"SMTP send failed: {str(e)}") from e
                logger.warning(f"⚠️ SMTP failed, falling back to Resend: {e}")

        if not self.resend_api_key:
            logger.error("❌ No email service configured - RESEND_API_KEY missing and no SMTP credentials")
            raise EmailDeliveryError("Email service not configured")

        try:
            logger.info(f"📧 Sending email via Resend to: {to}")
            response = await asyncio.to_thread(
                resend.Emails.send,
                {"from": self.from_address, "to": [to], "subject": subject, "html": html_content},
            )
            logger.info(f"✅ Email sent successfully via Resend: {response}")
            return response
        except Exception as e:
            logger.error(f"❌ Email send error to {to}: {e}")
            raise EmailDeliveryError(f"Failed to send email: {str(e)}") from e
