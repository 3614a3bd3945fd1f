from core.extensions import db
from core.imports import datetime


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(200), nullable=False)

    full_name = db.Column(db.String(200))
    phone = db.Column(db.String(50))
    country = db.Column(db.String(100))
    city = db.Column(db.String(100))
    zip_code = db.Column(db.String(20))

    referral_code = db.Column(db.String(20), unique=True, nullable=False, index=True)  # assigned to this user
    referred_by = db.Column(db.String(200), nullable=True)  # sponsor code used at signup, never changed

    balance = db.Column(db.Numeric(12, 2), default=0, nullable=False)  # commissions earned
    points = db.Column(db.Integer, default=0, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        """Public view of the account. The password hash is never included."""
        return {
            "id": self.id,
            "email": self.email,
            "fullName": self.full_name,
            "phone": self.phone,
            "country": self.country,
            "city": self.city,
            "zipCode": self.zip_code,
            "referralCode": self.referral_code,
            "referredBy": self.referred_by,
            "balance": float(self.balance or 0),
            "points": self.points,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<User {self.email}>"
