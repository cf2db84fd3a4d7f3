from credit_system import create_app

app = create_app()
