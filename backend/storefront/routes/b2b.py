"""
B2B inquiry API.

Routes:
- POST /api/v1/b2b/inquiry (JSON or form body)
"""

from flask import Blueprint, current_app, jsonify, request

from ..services.b2b_inquiry import build_inquiry_url, extract_inquiry, validate_inquiry

b2b_bp = Blueprint('b2b', __name__)


@b2b_bp.route('/inquiry', methods=['POST'])
def submit_inquiry():
    body = request.get_json(silent=True) or request.form
    inquiry = extract_inquiry(body)
    result = validate_inquiry(inquiry)

    if not result.is_valid:
        return (
            jsonify(
                {
                    'success': False,
                    'errors': [error.to_dict() for error in result.errors],
                    'message': 'Faltan campos requeridos.',
                    'error': 'BAD_REQUEST',
                }
            ),
            400,
        )

    url = build_inquiry_url(
        inquiry,
        number=current_app.config.get('WHATSAPP_NUMBER'),
        base=current_app.config.get('WHATSAPP_BASE'),
    )
    return jsonify({'success': True, 'data': {'url': url}, 'message': 'Solicitud lista'})
