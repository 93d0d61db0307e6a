"""
Flask extensions shared by the console blueprints
"""
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Bound to the app in ConsoleApp.create_app; limits come from RATELIMIT_* config
limiter = Limiter(key_func=get_remote_address)
