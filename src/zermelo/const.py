from . import __version__

API_DOMAIN = "zportal.nl"
API_PATH = "/api/v3"
TOKEN_ENDPOINT = "oauth/token"
APPOINTMENTS_ENDPOINT = "appointments"

# The legacy client sent "autorization_code"; the API documents the OAuth spelling.
GRANT_TYPE = "authorization_code"

# Appointments are requested for the owner of the access token
CURRENT_USER = "~me"

DEFAULT_TIMEOUT = 30.0
TIMEZONE = "Europe/Amsterdam"

USER_AGENT = f"python-zermelo/{__version__}"
