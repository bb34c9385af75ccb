"""Flask-free helpers shared by the service layer and routes."""
