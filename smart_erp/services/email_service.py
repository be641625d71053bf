"""Outbound email for password reset links."""

import logging
from email.message import EmailMessage

import aiosmtplib

from smart_erp.config import get_settings
from smart_erp.exceptions import ServerError

logger = logging.getLogger(__name__)

RESET_SUBJECT = "Reset Your Password - Smart ERP"

RESET_HTML_TEMPLATE = """\
<div style="font-family: Arial, sans-serif; color: #333; max-width: 600px; margin: 0 auto; \
border: 1px solid #eee; padding: 20px; border-radius: 8px;">
    <h2 style="color: #4F46E5; text-align: center;">Reset Your Password</h2>
    <p>Hello {name},</p>
    <p>Click the button below to reset your password. This link is valid for {minutes} minutes.</p>
    <div style="text-align: center; margin: 30px 0;">
        <a href="{link}" style="background-color: #4F46E5; color: white; padding: 12px 24px; \
text-decoration: none; border-radius: 6px; font-weight: bold; display: inline-block;">\
Set New Password</a>
    </div>
    <p style="font-size: 12px; color: #777; text-align: center;">\
If you didn't request this, please ignore this email.</p>
</div>
"""


class EmailService:
    """Sends transactional email over SMTP. No retries; a failed send fails the request."""

    def __init__(self) -> None:
        self.settings = get_settings()

    def build_reset_link(self, token: str) -> str:
        """Frontend URL the user follows to choose a new password."""
        return f"{self.settings.frontend_url.rstrip('/')}/reset-password/{token}"

    def build_reset_message(self, to_email: str, name: str, link: str) -> EmailMessage:
        """Compose the password reset email with plain-text and HTML parts."""
        minutes = self.settings.reset_token_expiration_minutes

        message = EmailMessage()
        message["From"] = self.settings.sender_address or "no-reply@smart-erp.local"
        message["To"] = to_email
        message["Subject"] = RESET_SUBJECT
        message.set_content(
            f"Hello {name},\n\n"
            f"Use the link below to reset your password. It is valid for {minutes} minutes.\n\n"
            f"{link}\n\n"
            "If you didn't request this, please ignore this email."
        )
        message.add_alternative(
            RESET_HTML_TEMPLATE.format(name=name, link=link, minutes=minutes), subtype="html"
        )
        return message

    async def send_password_reset(self, to_email: str, name: str, token: str) -> None:
        """Send a password reset link.

        Raises:
            ServerError: If the SMTP exchange fails
        """
        message = self.build_reset_message(to_email, name, self.build_reset_link(token))

        try:
            await aiosmtplib.send(
                message,
                hostname=self.settings.smtp_host,
                port=self.settings.smtp_port,
                username=self.settings.smtp_username or None,
                password=self.settings.smtp_password or None,
                start_tls=self.settings.smtp_use_tls,
            )
        except Exception as e:
            logger.error(f"Failed to send password reset email: {e}")
            raise ServerError() from e

        logger.info("Password reset email sent")
