from credit_system.controllers.customer import customer_bp
from credit_system.controllers.credit import credit_bp

def register_routes(app):
    app.register_blueprint(customer_bp, url_prefix="/api")
    app.register_blueprint(credit_bp, url_prefix="/api")
