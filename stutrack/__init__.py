from flask import Flask
from flask_caching import Cache


# Create extension instances WITHOUT an app.
# They are "connected" to the app inside the factory.
cache = Cache()


def create_app(config_class='config.Config'):
    """
    Application Factory Function
    """

    app = Flask(__name__, instance_relative_config=True)

    # Load configuration from the config.py file
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    cache.init_app(app)

    # Register context processors
    from .models import Role

    @app.context_processor
    def inject_global_vars():
        return dict(Role=Role)

    # Register Blueprints
    # Imports are *inside* the factory to avoid circular import issues
    with app.app_context():
        from .main_routes import main_bp
        from .achievements_routes import achievements_bp

        app.register_blueprint(main_bp)
        app.register_blueprint(achievements_bp)

    app.logger.info("StuTrack configured with cache backend %s", app.config.get('CACHE_TYPE'))

    return app
