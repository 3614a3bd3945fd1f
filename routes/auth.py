from core.imports import Blueprint, jsonify, request
from core.errors import json_errors
from services.accounts import register_account, authenticate


auth_bp = Blueprint('auth', __name__)


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return {}
    return data


@auth_bp.route('/api/auth/register', methods=['POST'])
@json_errors
def register():
    """
    Register a new account
    ---
    tags:
      - Auth
    summary: Create an account and return a bearer token
    description: >
      Creates the account with a freshly generated referral code. When
      referralCode belongs to an existing account, that sponsor is credited
      with the sponsor commission.
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - email
            - password
          properties:
            email:
              type: string
              example: jane@example.com
            password:
              type: string
              example: secret123
            fullName:
              type: string
              example: Jane Doe
            phone:
              type: string
              example: "+919876543210"
            country:
              type: string
              example: India
            city:
              type: string
              example: Pune
            zipCode:
              type: string
              example: "411001"
            referralCode:
              type: string
              description: Sponsor's referral code
              example: GG7Q2KXA
    responses:
      200:
        description: Registered successfully
      400:
        description: Missing email/password or email already registered
      500:
        description: Server error
    """
    data = _json_body()

    user, token = register_account(
        email=data.get('email'),
        password=data.get('password'),
        full_name=data.get('fullName'),
        phone=data.get('phone'),
        country=data.get('country'),
        city=data.get('city'),
        zip_code=data.get('zipCode'),
        referral_code=data.get('referralCode')
    )

    return jsonify({
        "message": "Registered successfully",
        "token": token,
        "referralCode": user.referral_code
    }), 200


@auth_bp.route('/api/auth/login', methods=['POST'])
@json_errors
def login():
    """
    Log in with email and password
    ---
    tags:
      - Auth
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - email
            - password
          properties:
            email:
              type: string
              example: jane@example.com
            password:
              type: string
              example: secret123
    responses:
      200:
        description: Login successful
      400:
        description: Missing fields or invalid credentials
    """
    data = _json_body()

    user, token = authenticate(data.get('email'), data.get('password'))

    return jsonify({"message": "Login successful", "token": token}), 200
