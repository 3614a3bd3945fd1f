from core.imports import Blueprint, jsonify, jwt_required
from core.errors import json_errors


payment_bp = Blueprint('payment', __name__)

SIMULATED_PAYMENT_MESSAGE = "Payment processing simulated. Integrate Stripe for live payments."


# Placeholder only. Never send real card data here; a live flow belongs to the
# payment provider's hosted checkout.
@payment_bp.route('/api/payment/process', methods=['POST'])
@jwt_required()
@json_errors
def process_payment():
    """
    Simulated payment
    ---
    tags:
      - Payment
    security:
      - Bearer: []
    responses:
      200:
        description: Always succeeds, nothing is charged
      401:
        description: Missing or invalid token
    """
    return jsonify({"message": SIMULATED_PAYMENT_MESSAGE}), 200
