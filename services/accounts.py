"""
Account lifecycle: registration with sponsor crediting, login and profile lookup.

The functions here raise ``core.errors`` exceptions and leave it to the
route layer to turn them into responses.
"""
from core.imports import secrets, string, current_app, create_access_token
from core.extensions import db, bcrypt
from core.errors import ValidationError, ConflictError, AuthError, NotFoundError, InternalError, ErrorMessage
from models.userModel import User


def generate_referral_code(length=None, prefix=None):
    """Generate a random uppercase alphanumeric referral code, e.g. ``GG7Q2KXA``.

    Uniqueness is not checked here; the unique index on ``users.referral_code``
    rejects the rare collision at commit time.
    """
    length = length or current_app.config["REFERRAL_CODE_LENGTH"]
    prefix = current_app.config["REFERRAL_CODE_PREFIX"] if prefix is None else prefix
    alphabet = string.ascii_uppercase + string.digits
    code = ''.join(secrets.choice(alphabet) for _ in range(length))
    return f"{prefix}{code}"


def issue_token(user):
    return create_access_token(
        identity=str(user.id),
        additional_claims={"email": user.email}
    )


def credit_sponsor(referral_code, amount=None):
    """Add the sponsor commission to the account owning ``referral_code``.

    Commits on its own. Returns the credited sponsor, or None when no
    account has that code.
    """
    amount = current_app.config["SPONSOR_COMMISSION"] if amount is None else amount

    sponsor = User.query.filter_by(referral_code=referral_code).first()
    if not sponsor:
        current_app.logger.info("Referral code %s matches no account, nothing credited", referral_code)
        return None

    sponsor.balance = (sponsor.balance or 0) + amount
    db.session.commit()

    current_app.logger.info("Credited sponsor %s with %s", sponsor.id, amount)
    return sponsor


def register_account(email, password, full_name=None, phone=None, country=None,
                     city=None, zip_code=None, referral_code=None):
    """Create an account and return ``(user, token)``.

    If ``referral_code`` belongs to an existing account, that sponsor is
    credited first, in its own commit. A failure while saving the new
    account does not undo the credit.
    """
    if not email or not password:
        raise ValidationError(ErrorMessage.CREDENTIALS_REQUIRED)

    if User.query.filter_by(email=email).first():
        raise ConflictError(ErrorMessage.EMAIL_TAKEN)

    hashed_password = bcrypt.generate_password_hash(password).decode('utf-8')

    new_user = User(
        email=email,
        password_hash=hashed_password,
        full_name=full_name,
        phone=phone,
        country=country,
        city=city,
        zip_code=zip_code,
        referral_code=generate_referral_code(),
        referred_by=referral_code or None
    )

    if referral_code:
        credit_sponsor(referral_code)

    db.session.add(new_user)
    db.session.commit()

    current_app.logger.info("Registered account %s (%s)", new_user.id, new_user.email)
    return new_user, issue_token(new_user)


def authenticate(email, password):
    """Check credentials and return ``(user, token)``.

    Unknown email and wrong password raise the same error.
    """
    if not email or not password:
        raise ValidationError(ErrorMessage.CREDENTIALS_REQUIRED)

    user = User.query.filter_by(email=email).first()
    if not user or not bcrypt.check_password_hash(user.password_hash, password):
        current_app.logger.warning("Failed login attempt for %s", email)
        raise AuthError(ErrorMessage.INVALID_CREDENTIALS)

    return user, issue_token(user)


def get_profile(user_id):
    try:
        user = db.session.get(User, int(user_id))
    except Exception as e:
        current_app.logger.exception("Profile lookup failed for %s", user_id)
        raise InternalError() from e

    if not user:
        raise NotFoundError(ErrorMessage.USER_NOT_FOUND)
    return user.to_dict()
