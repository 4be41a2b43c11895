import logging

from flask import Flask, jsonify
from flask_cors import CORS

from foodswipe.core.config import settings
from foodswipe.api.routes import register_api


def create_app():
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = Flask(__name__)
    app.config['SECRET_KEY'] = settings.SECRET_KEY

    # mobile client calls from another origin
    CORS(
        app,
        resources={r"/api/*": {"origins": "*"}},
        supports_credentials=False,
    )

    register_api(app)

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"}), 200

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=settings.PORT, debug=True)
