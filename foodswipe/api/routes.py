# foodswipe/api/routes.py

from foodswipe.api.endpoints.restaurants import bp as restaurants_bp


def register_api(app):
    # All REST routes live under /api, matching the mobile client's base URL
    app.register_blueprint(restaurants_bp, url_prefix="/api")
