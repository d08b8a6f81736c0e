# blogdesk/routes/__init__.py
from flask import Flask

def register_routes(app: Flask):
    """
    Registrar todos los blueprints de la carpeta routes.
    Llamá a register_routes(app) desde blogdesk.create_app().
    """
    # Import local para evitar problemas de import circular al inicializar la app
    from .auth import auth_bp
    from .blog_routes import blog_bp
    from .comment_routes import comment_bp
    from .errors import errors_bp
    app.register_blueprint(auth_bp, url_prefix="/")
    app.register_blueprint(blog_bp, url_prefix="/blogs")
    app.register_blueprint(comment_bp, url_prefix="/blogs")
    app.register_blueprint(errors_bp)
