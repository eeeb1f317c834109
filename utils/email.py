# utils/email.py
import html

import requests

from config import BREVO_API_KEY, REMINDER_SENDER_EMAIL, REMINDER_SENDER_NAME

BREVO_URL = "https://api.brevo.com/v3/smtp/email"


class EmailDeliveryError(Exception):
     pass


def send_reminder_email(to_email: str, to_name: str, subject: str, body: str):
     if not BREVO_API_KEY:
          raise EmailDeliveryError("BREVO_API_KEY is not set")

     paragraphs = "".join(f"<p>{html.escape(line)}</p>" for line in body.split("\n") if line.strip())
     try:
          response = requests.post(
               BREVO_URL,
               headers={
                    "api-key": BREVO_API_KEY,
                    "Content-Type": "application/json",
               },
               json={
                    "sender": {"name": REMINDER_SENDER_NAME, "email": REMINDER_SENDER_EMAIL},
                    "to": [{"email": to_email, "name": to_name}],
                    "subject": subject,
                    "htmlContent": f"""
                         <h2>{html.escape(subject)}</h2>
                         {paragraphs}
                    """,
               },
               timeout=10,
          )
     except requests.RequestException as exc:
          raise EmailDeliveryError(f"Brevo request failed: {exc}") from exc
     if response.status_code not in (200, 201):
          raise EmailDeliveryError(f"Brevo error: {response.text}")
