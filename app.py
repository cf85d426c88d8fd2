from flask import Flask, jsonify
from config.config import Config
from extensions import db, login_manager, migrate

# Route Imports
from routes.auth_routes import auth_bp
from routes.teacher_routes import teacher_bp
from routes.student_routes import student_bp

from models.teacher import Teacher
from models.student import Student
from utils.seed_data import run_seed

USER_MODELS = {
    "teacher": Teacher,
    "student": Student,
}


def create_app(config_class=Config, mark_store=None):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Initialize Extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    if mark_store is not None:
        app.extensions["mark_store"] = mark_store

    # Ids look like "teacher:3" / "student:7", see Teacher.get_id
    @login_manager.user_loader
    def load_user(user_id):
        role, _, pk = str(user_id).partition(":")
        model = USER_MODELS.get(role)
        if model is None or not pk.isdigit():
            return None
        return db.session.get(model, int(pk))

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({"error": "Login required"}), 401

    # Register Blueprints
    app.register_blueprint(auth_bp)
    app.register_blueprint(teacher_bp)
    app.register_blueprint(student_bp)

    @app.cli.command("seed")
    def seed_command():
        """Insert the default subject catalog."""
        run_seed()

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=5000, debug=True)
