from core.imports import Flask
from core.config import Config, resolve_log_level
from core.extensions import db, jwt, swagger, cors, bcrypt, migrate
import core.session
from routes.auth import auth_bp
from routes.user import user_bp
from routes.payment import payment_bp

def create_app(config_class=Config):
    app = Flask(__name__, static_folder="public", static_url_path="")
    app.config.from_object(config_class)
    app.logger.setLevel(resolve_log_level(app.config["LOG_LEVEL"]))

    db.init_app(app)
    jwt.init_app(app)
    swagger.init_app(app)
    cors.init_app(app)
    bcrypt.init_app(app)
    migrate.init_app(app, db)

    app.register_blueprint(auth_bp)
    app.register_blueprint(user_bp)
    app.register_blueprint(payment_bp)

    @app.route('/')
    def index():
        return app.send_static_file('index.html')

    @app.route('/ping')
    def ping():
        return "Ping received", 200

    return app

app = create_app()


if __name__ == "__main__":
    with app.app_context():
        db.create_all()

    app.run(host="0.0.0.0", port=app.config["PORT"], debug=True)
