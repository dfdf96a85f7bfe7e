"""
B2B inquiry - validation and lead message assembly for the Miami form.

Leads are closed over WhatsApp, so a valid submission turns into a
pre-formatted message link for the sales team.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from .contact_links import DEFAULT_WHATSAPP_BASE, DEFAULT_WHATSAPP_NUMBER, build_contact_url

INQUIRY_FIELDS = ('name', 'business', 'products', 'volume', 'payment', 'message')

# (field, form input id, error element id, label)
REQUIRED_FIELDS = (
    ('name', 'field-name', 'error-name', 'nombre completo'),
    ('business', 'field-business', 'error-business', 'negocio o empresa'),
    ('products', 'field-products', 'error-products', 'productos'),
)

SOURCE_FOOTER = '_Solicitud enviada desde phonestoreca.com/b2b-miami_'


@dataclass(frozen=True)
class FieldError:
    field: str
    field_id: str
    error_id: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {
            'field': self.field,
            'field_id': self.field_id,
            'error_id': self.error_id,
            'message': self.message,
        }


@dataclass
class ValidationResult:
    is_valid: bool
    errors: List[FieldError] = field(default_factory=list)

    def errors_by_field(self) -> Dict[str, str]:
        return {error.field: error.message for error in self.errors}


def extract_inquiry(source: Mapping[str, Any]) -> Dict[str, str]:
    """Trimmed values for every known field; missing ones become ''."""
    return {name: str(source.get(name) or '').strip() for name in INQUIRY_FIELDS}


def validate_inquiry(data: Mapping[str, Any]) -> ValidationResult:
    errors = [
        FieldError(
            field=name,
            field_id=field_id,
            error_id=error_id,
            message=f'El campo "{label}" es requerido.',
        )
        for name, field_id, error_id, label in REQUIRED_FIELDS
        if not str(data.get(name) or '').strip()
    ]
    return ValidationResult(is_valid=not errors, errors=errors)


def build_inquiry_message(data: Mapping[str, Any]) -> str:
    """Line-per-fact lead summary; optional fields are left out when empty."""
    inquiry = extract_inquiry(data)
    lines = [
        '🏢 *SOLICITUD B2B | Phone Store Miami*',
        '',
        f"👤 *Nombre:* {inquiry['name']}",
        f"🏬 *Negocio:* {inquiry['business']}",
        '',
        '📦 *Productos solicitados:*',
        inquiry['products'],
        '',
    ]
    if inquiry['volume']:
        lines.append(f"📊 *Volumen estimado:* {inquiry['volume']}")
    if inquiry['payment']:
        lines.append(f"💳 *Método de pago:* {inquiry['payment']}")
    if inquiry['message']:
        lines.append(f"💬 *Comentarios:*\n{inquiry['message']}")
    lines.extend(['', SOURCE_FOOTER])
    return '\n'.join(lines)


def build_inquiry_url(data: Mapping[str, Any],
                      number: str = DEFAULT_WHATSAPP_NUMBER,
                      base: str = DEFAULT_WHATSAPP_BASE) -> str:
    return build_contact_url(build_inquiry_message(data), number, base)
