"""
Outbound messaging links (WhatsApp click-to-chat).
"""

from urllib.parse import quote

DEFAULT_WHATSAPP_BASE = 'https://wa.me/'
DEFAULT_WHATSAPP_NUMBER = '584146395496'


def build_contact_url(message: str,
                      number: str = DEFAULT_WHATSAPP_NUMBER,
                      base: str = DEFAULT_WHATSAPP_BASE) -> str:
    """Link that opens a chat with ``message`` pre-filled.

    The message is percent-encoded the way browsers' encodeURIComponent
    does it, so line breaks and emoji survive the redirect.
    """
    encoded = quote(message or '', safe="-_.!~*'()")
    return f"{base}{number}?text={encoded}"
