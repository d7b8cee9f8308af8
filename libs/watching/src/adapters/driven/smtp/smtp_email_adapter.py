"""SMTP Email Adapter

Implements NotificationChannelPort
Sends reports over SMTP (STARTTLS or implicit TLS)
Body is sent as plain text plus an HTML alternative rendered from Markdown
"""

import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

import markdown

from libs.shared.src.dtos.settings.watcher_settings_dto import SmtpSettingsDTO
from libs.shared.src.enums.smtp_tls_mode import SmtpTlsMode
from libs.watching.src.ports.notification_channel_port import (
    NotificationChannelPort,
)


class SmtpEmailAdapter(NotificationChannelPort):
    """SMTP Email Adapter

    Settings come from the SMTP credential group:
    - SMTP_SERVER / SMTP_PORT / SMTP_TLS (starttls | implicit)
    - SMTP_USERNAME / SMTP_PASSWORD
    - EMAIL_FROM / EMAIL_TO (comma-separated)
    """

    name = "email"

    # HTML Email 樣式
    HTML_STYLE = """
    <style>
        body {
            font-family: 'Segoe UI', Arial, sans-serif;
            line-height: 1.6;
            color: #333;
            max-width: 640px;
            margin: 0 auto;
            padding: 20px;
        }
        p:first-child {
            font-weight: 600;
            border-bottom: 3px solid #4a90d9;
            padding-bottom: 8px;
        }
        li {
            margin: 4px 0;
        }
    </style>
    """

    def __init__(self, settings: SmtpSettingsDTO, timeout: float = 30.0) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._settings = settings
        self._timeout = timeout

    def send(self, subject: str, body: str) -> bool:
        """Send report email"""
        host = self._settings["server"]
        port = self._settings["port"]
        try:
            message = self._build_message(subject, body)
            context = ssl.create_default_context()

            if self._settings["tls_mode"] == SmtpTlsMode.IMPLICIT.value:
                with smtplib.SMTP_SSL(
                    host, port, timeout=self._timeout, context=context
                ) as server:
                    self._deliver(server, message)
            else:
                with smtplib.SMTP(host, port, timeout=self._timeout) as server:
                    server.starttls(context=context)
                    self._deliver(server, message)

            self._logger.info(f"Email sent: {subject}")
            return True

        except Exception as e:
            self._logger.warning(f"Email send failed: {e}")
            return False

    def _deliver(self, server: smtplib.SMTP, message: MIMEMultipart) -> None:
        server.login(self._settings["username"], self._settings["password"])
        server.sendmail(
            self._settings["email_from"],
            self._settings["email_to"],
            message.as_string(),
        )

    def _build_message(self, subject: str, body: str) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["From"] = self._settings["email_from"]
        msg["To"] = ", ".join(self._settings["email_to"])
        msg["Subject"] = subject

        msg.attach(MIMEText(body, "plain", "utf-8"))
        msg.attach(MIMEText(self._markdown_to_html(body), "html", "utf-8"))
        return msg

    def _markdown_to_html(self, md_content: str) -> str:
        """Convert Markdown to styled HTML"""
        html_content = markdown.markdown(md_content, extensions=["extra"])
        return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    {self.HTML_STYLE}
</head>
<body>
    {html_content}
</body>
</html>
"""
