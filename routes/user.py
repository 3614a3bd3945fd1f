from core.imports import Blueprint, jsonify, jwt_required
from core.errors import json_errors
from core.session import current_identity
from services.accounts import get_profile


user_bp = Blueprint('user', __name__)


@user_bp.route('/api/user/me', methods=['GET'])
@jwt_required()
@json_errors
def me():
    """
    Get the authenticated user's profile
    ---
    tags:
      - User
    security:
      - Bearer: []
    parameters:
      - name: Authorization
        in: header
        description: 'JWT token as: Bearer <your_token>'
        required: true
        type: string
    responses:
      200:
        description: Account record without the password hash
      401:
        description: Missing or invalid token
      404:
        description: User not found
    """
    identity = current_identity()
    return jsonify(get_profile(identity["id"])), 200
