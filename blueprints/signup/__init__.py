"""Newsletter signup blueprint."""
from flask import Blueprint

signup_bp = Blueprint('signup', __name__)

from . import routes  # noqa: E402,F401
